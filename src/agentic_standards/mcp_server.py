"""
MCP Server for Agentic Development Standards.

Serves development standards, conventions and workflow patterns on demand
via the Model Context Protocol, so an agent fetches the one document it
needs instead of loading the whole collection into its context window.

Tools:
- get_core_standard: universal-agent-rules, terminal-standards, commit-conventions
- get_workflow_pattern: context-preservation, session-management, branch-strategy, ...
- get_integration_guide: overview, opencode, claude-code, cursor, ...
- search_standards: keyword search with context across all documents
- list_available_standards: discover every document with a one-line description

Usage:
    # stdio transport (default, for CLI tools)
    uv run agentic-standards-mcp

    # Or directly
    python -m agentic_standards
"""

import logging
import os
import sys
from pathlib import Path
from typing import Annotated, Optional

from dotenv import load_dotenv

# Load .env from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from .dispatch import Operation, ToolDispatcher, ToolResponse
from .exceptions import InvalidArgumentError
from .registry import DocumentRegistry, Namespace

logger = logging.getLogger(__name__)

SERVER_NAME = "agentic-dev-standards"
SERVER_VERSION = "2.0.0"

# =============================================================================
# MCP Server Instance
# =============================================================================

mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "Development standards, workflow patterns and tool integration guides "
        "for AI coding agents.\n\n"
        "Recommended workflow:\n"
        "1. Use 'list_available_standards' to see what exists\n"
        "2. Fetch only the documents relevant to the task\n"
        "3. Use 'search_standards' when you need a specific rule or phrase"
    ),
)

_DISPATCHER: Optional[ToolDispatcher] = None


def _get_dispatcher() -> ToolDispatcher:
    """Get or create the dispatcher singleton."""
    global _DISPATCHER
    if _DISPATCHER is None:
        _DISPATCHER = ToolDispatcher(DocumentRegistry())
    return _DISPATCHER


def _respond(response: ToolResponse) -> str:
    """Return successful text, or raise so FastMCP flags the result as an error."""
    if response.is_error:
        raise ToolError(response.text)
    return response.text


def _key_field(namespace: Namespace, description: str):
    """Schema for a key argument: advertise the enum, validate in the dispatcher."""
    return Field(
        description=description,
        json_schema_extra={"enum": DocumentRegistry().keys(namespace)},
    )


# =============================================================================
# TOOLS: Document Retrieval
# =============================================================================

@mcp.tool(name=Operation.GET_CORE_STANDARD.value)
def get_core_standard(
    standard: Annotated[str, _key_field(Namespace.CORE, "The core standard to retrieve")],
) -> str:
    """
    Retrieve a core development standard.

    Available standards: universal-agent-rules (meta-rules, MCP guidance,
    testing, code quality), terminal-standards (CRITICAL: clean shell
    environment requirements), commit-conventions (conventional commits format)
    """
    return _respond(_get_dispatcher().get_core_standard(standard))


@mcp.tool(name=Operation.GET_WORKFLOW_PATTERN.value)
def get_workflow_pattern(
    pattern: Annotated[str, _key_field(Namespace.WORKFLOW, "The workflow pattern to retrieve")],
) -> str:
    """
    Retrieve a workflow pattern document.

    Available patterns: context-preservation (token management, ADRs),
    session-management (session start checklist, summaries), branch-strategy
    (git workflows, PR guidelines), github-issues (issue/PR management),
    dependency-management (dependency evaluation), multi-agent-orchestration
    (sub-agents, model routing, decomposition), agent-safety (permissions,
    destructive ops, secrets, sandboxing)
    """
    return _respond(_get_dispatcher().get_workflow_pattern(pattern))


@mcp.tool(name=Operation.GET_INTEGRATION_GUIDE.value)
def get_integration_guide(
    tool: Annotated[str, _key_field(Namespace.INTEGRATION, "The integration guide to retrieve")],
) -> str:
    """
    Retrieve a tool-specific integration guide.

    Available guides: overview (comparison matrix), opencode (OpenCode terminal
    agent + MCP setup), vscode-copilot (GitHub Copilot setup), cursor (Cursor
    IDE setup), claude-code (Claude CLI + MCP setup), windsurf (Windsurf IDE
    setup), continue (Continue extension setup)
    """
    return _respond(_get_dispatcher().get_integration_guide(tool))


# =============================================================================
# TOOLS: Search & Discovery
# =============================================================================

@mcp.tool(name=Operation.SEARCH_STANDARDS.value)
def search_standards(
    keyword: Annotated[str, Field(description="The keyword or phrase to search for")],
    maxResults: Annotated[
        int, Field(description="Maximum number of results to return (default: 10)")
    ] = 10,
    contextLines: Annotated[
        int,
        Field(description="Number of lines of context to show before/after matches (default: 2)"),
    ] = 2,
) -> str:
    """
    Search across all standards for a keyword or phrase.

    Returns matching lines with context from all markdown files.
    """
    return _respond(_get_dispatcher().dispatch(
        Operation.SEARCH_STANDARDS.value,
        {"keyword": keyword, "maxResults": maxResults, "contextLines": contextLines},
    ))


@mcp.tool(name=Operation.LIST_AVAILABLE_STANDARDS.value)
def list_available_standards() -> str:
    """
    List all available standards, workflow patterns, and integration guides with descriptions.

    Use this to discover what standards are available before fetching specific ones.
    """
    return _respond(_get_dispatcher().list_available_standards())


# =============================================================================
# RESOURCES: Browsable Documents
# =============================================================================

@mcp.resource("standards://index")
def resource_index() -> str:
    """Every available document, grouped by namespace."""
    return list_available_standards()


@mcp.resource("standards://{namespace}/{key}")
def resource_document(namespace: str, key: str) -> str:
    """A single document by namespace (core, workflow, integration) and key."""
    try:
        resolved = Namespace(namespace)
    except ValueError:
        valid = ", ".join(n.value for n in Namespace)
        raise InvalidArgumentError(
            f'Unknown namespace "{namespace}". Available: {valid}'
        ) from None
    return _get_dispatcher().registry.resolve(resolved, key)


# =============================================================================
# Entry Point
# =============================================================================

def configure_logging() -> None:
    """Log to stderr; stdout carries the MCP protocol."""
    level_name = os.getenv("AGENTIC_STANDARDS_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level > logging.DEBUG:
        # Suppress verbose MCP logging
        logging.getLogger("mcp").setLevel(logging.WARNING)


def main():
    """Run the MCP server (stdio transport)."""
    configure_logging()
    logger.info(
        f"Agentic Dev Standards MCP server v{SERVER_VERSION} running on stdio "
        f"(documents: {_get_dispatcher().registry.root})"
    )
    mcp.run()


if __name__ == "__main__":
    main()
