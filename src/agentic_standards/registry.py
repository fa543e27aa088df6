"""
Document registry for the fixed set of standards documents.

Maps logical keys in three namespaces (core standards, workflow patterns,
integration guides) to markdown files under a single document root, and
resolves a (namespace, key) pair to the file's current text.

The tables are built once at import time and exposed read-only; there is
no API for adding or removing documents at runtime.
"""

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import UnknownDocumentError
from .fs import read_text

logger = logging.getLogger(__name__)

# Markdown corpus shipped alongside the server code
DEFAULT_ROOT = Path(__file__).parent / "standards"

# Top-level README is searched too, but isn't fetchable by key
README_PATH = "README.md"


class Namespace(enum.Enum):
    """The three disjoint key namespaces."""

    CORE = "core"
    WORKFLOW = "workflow"
    INTEGRATION = "integration"

    @property
    def label(self) -> str:
        """Human label used in error messages."""
        return _LABELS[self]


_LABELS = {
    Namespace.CORE: "core standard",
    Namespace.WORKFLOW: "workflow pattern",
    Namespace.INTEGRATION: "integration tool",
}


@dataclass(frozen=True)
class DocumentEntry:
    """One registered document."""
    key: str
    path: str
    description: str


def _table(*entries: DocumentEntry) -> Mapping[str, DocumentEntry]:
    return MappingProxyType({entry.key: entry for entry in entries})


# =============================================================================
# Registration Tables
# =============================================================================

CORE_STANDARDS = _table(
    DocumentEntry(
        "universal-agent-rules",
        "universal-agent-rules.md",
        "Universal best practices for all AI coding agents — meta-rules, MCP guidance, "
        "testing, code quality, documentation organization",
    ),
    DocumentEntry(
        "terminal-standards",
        "terminal-standards.md",
        "CRITICAL: Clean shell environment requirements for predictable AI agent "
        "behavior — PATH setup, pager avoidance, command combining",
    ),
    DocumentEntry(
        "commit-conventions",
        "commit-conventions.md",
        "Conventional Commits format — types, scopes, atomic commits, examples",
    ),
)

WORKFLOW_PATTERNS = _table(
    DocumentEntry(
        "context-preservation",
        "workflow-patterns/context-preservation.md",
        "Token budget management, progressive summarization, Architecture Decision "
        "Records (ADRs), session handoff patterns",
    ),
    DocumentEntry(
        "session-management",
        "workflow-patterns/session-management.md",
        "Session start/end checklists, summary templates, context loading, session tracking",
    ),
    DocumentEntry(
        "branch-strategy",
        "workflow-patterns/branch-strategy.md",
        "Git branch naming conventions, workflows (GitHub Flow, Git Flow, trunk-based), "
        "PR guidelines",
    ),
    DocumentEntry(
        "github-issues",
        "workflow-patterns/github-issues.md",
        "Issue and PR management — label conventions, templates, linking, automation",
    ),
    DocumentEntry(
        "dependency-management",
        "workflow-patterns/dependency-management.md",
        "Evaluation checklist before adding dependencies — maintenance, licensing, "
        "security, bundle size",
    ),
    DocumentEntry(
        "multi-agent-orchestration",
        "workflow-patterns/multi-agent-orchestration.md",
        "Sub-agent patterns, task decomposition, context passing, model specialization "
        "& routing, cost management, anti-patterns",
    ),
    DocumentEntry(
        "agent-safety",
        "workflow-patterns/agent-safety.md",
        "Permission models, destructive operation detection, secrets management, "
        "sandboxing, audit trails, rollback patterns",
    ),
)

INTEGRATION_GUIDES = _table(
    DocumentEntry(
        "overview",
        "integration/README.md",
        "Tool comparison matrix, capability tables, integration patterns, when to "
        "choose each tool",
    ),
    DocumentEntry(
        "opencode",
        "integration/opencode.md",
        "OpenCode terminal agent — MCP setup, AGENTS.md, rules, Plan/Build modes, "
        "plugins, model config",
    ),
    DocumentEntry(
        "vscode-copilot",
        "integration/vscode-copilot.md",
        "GitHub Copilot in VSCode — copilot-instructions.md, terminal config, inline "
        "suggestions",
    ),
    DocumentEntry(
        "cursor",
        "integration/cursor.md",
        "Cursor AI IDE — .cursor/rules/, agent mode, background agents, Composer",
    ),
    DocumentEntry(
        "claude-code",
        "integration/claude-code.md",
        "Claude Code CLI — CLAUDE.md, hooks, sub-agents, Skills, CI/CD, Agent SDK, "
        "multi-surface",
    ),
    DocumentEntry(
        "windsurf",
        "integration/windsurf.md",
        "Windsurf IDE — .windsurfrules, Cascade mode, AI features",
    ),
    DocumentEntry(
        "continue",
        "integration/continue.md",
        "Continue extension — config.json, context providers, multi-provider, open-source",
    ),
)

TABLES: Mapping[Namespace, Mapping[str, DocumentEntry]] = MappingProxyType({
    Namespace.CORE: CORE_STANDARDS,
    Namespace.WORKFLOW: WORKFLOW_PATTERNS,
    Namespace.INTEGRATION: INTEGRATION_GUIDES,
})


# =============================================================================
# Registry
# =============================================================================

class DocumentRegistry:
    """
    Resolves registered document keys to file contents.

    Every lookup re-reads the file; the registry holds no document state,
    only the root directory the relative paths are joined to.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else DEFAULT_ROOT

    def entries(self, namespace: Namespace) -> list[DocumentEntry]:
        """Registered entries for a namespace, in registration order."""
        return list(TABLES[namespace].values())

    def keys(self, namespace: Namespace) -> list[str]:
        return list(TABLES[namespace])

    def path_for(self, namespace: Namespace, key: str) -> str:
        """
        Relative path registered for a key.

        Raises:
            UnknownDocumentError: If the key isn't registered in this namespace.
        """
        entry = TABLES[namespace].get(key)
        if entry is None:
            raise UnknownDocumentError(namespace.label, key, self.keys(namespace))
        return entry.path

    def read(self, relative_path: str) -> str:
        """Read a document by its path relative to the root."""
        return read_text(self.root / relative_path, display_path=relative_path)

    def resolve(self, namespace: Namespace, key: str) -> str:
        """
        Return the full text of the document registered under key.

        Raises:
            UnknownDocumentError: Key not registered in the namespace.
            DocumentNotFoundError: Key registered but the file is missing/unreadable.
        """
        relative_path = self.path_for(namespace, key)
        logger.debug(f"Resolving {namespace.value}/{key} -> {relative_path}")
        return self.read(relative_path)

    def all_paths(self) -> list[str]:
        """Every registered path: core, then workflow, then integration."""
        return [
            entry.path
            for table in TABLES.values()
            for entry in table.values()
        ]

    def search_paths(self) -> list[str]:
        """Paths scanned by keyword search (registered documents plus the README)."""
        return self.all_paths() + [README_PATH]
