"""
Tool dispatcher - the operation surface exposed to MCP clients.

Each tool call is an independent request: validate the arguments, route
to the registry or the search engine, and wrap the outcome in a
ToolResponse. Nothing raised underneath escapes dispatch(); failures come
back as text with is_error set so the client can tell "the tool failed"
apart from "the tool found nothing".
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import InvalidArgumentError, StandardsError
from .registry import DocumentRegistry, Namespace
from .search import format_results, search

logger = logging.getLogger(__name__)


class Operation(enum.Enum):
    """The closed set of tool names."""

    GET_CORE_STANDARD = "get_core_standard"
    GET_WORKFLOW_PATTERN = "get_workflow_pattern"
    GET_INTEGRATION_GUIDE = "get_integration_guide"
    SEARCH_STANDARDS = "search_standards"
    LIST_AVAILABLE_STANDARDS = "list_available_standards"


# Fetch operations: namespace and the argument that carries the key
FETCH_OPERATIONS = {
    Operation.GET_CORE_STANDARD: (Namespace.CORE, "standard"),
    Operation.GET_WORKFLOW_PATTERN: (Namespace.WORKFLOW, "pattern"),
    Operation.GET_INTEGRATION_GUIDE: (Namespace.INTEGRATION, "tool"),
}

# Listing sections: heading and the tool that fetches them
_LISTING_SECTIONS = (
    (Namespace.CORE, "Core Standards", Operation.GET_CORE_STANDARD),
    (Namespace.WORKFLOW, "Workflow Patterns", Operation.GET_WORKFLOW_PATTERN),
    (Namespace.INTEGRATION, "Integration Guides", Operation.GET_INTEGRATION_GUIDE),
)


@dataclass(frozen=True)
class ToolResponse:
    """Single text payload, plus whether it describes a failure."""
    text: str
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResponse":
        return cls(text=f"Error: {message}", is_error=True)


def _optional_int(arguments: dict, name: str) -> Optional[int]:
    """Read an optional integer argument; JSON numbers may arrive as floats."""
    value = arguments.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidArgumentError(f"{name} must be a whole number, got {value!r}")
    return int(value)


class ToolDispatcher:
    """Routes named tool calls to the registry and the search engine."""

    def __init__(self, registry: Optional[DocumentRegistry] = None):
        self.registry = registry or DocumentRegistry()

    def dispatch(self, name: str, arguments: Optional[dict[str, Any]] = None) -> ToolResponse:
        """
        Run one tool call and return its response.

        Args:
            name: Tool name (one of Operation's values).
            arguments: Tool arguments as received from the client.

        Returns:
            ToolResponse; is_error is set for unknown tools, bad arguments,
            unknown keys and missing files.
        """
        arguments = arguments or {}

        try:
            operation = Operation(name)
        except ValueError:
            logger.warning(f"Unknown tool requested: {name}")
            return ToolResponse.error(f'Unknown tool "{name}"')

        try:
            if operation in FETCH_OPERATIONS:
                namespace, argument = FETCH_OPERATIONS[operation]
                return self.fetch(namespace, arguments.get(argument))
            if operation is Operation.SEARCH_STANDARDS:
                return self.search_standards(
                    arguments.get("keyword"),
                    max_results=_optional_int(arguments, "maxResults"),
                    context_lines=_optional_int(arguments, "contextLines"),
                )
            return self.list_available_standards()
        except StandardsError as e:
            logger.info(f"{operation.value} failed: {e}")
            return ToolResponse.error(str(e))

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def fetch(self, namespace: Namespace, key: Any) -> ToolResponse:
        """Return the full text of one registered document."""
        if not isinstance(key, str):
            # Reported the same way as an unregistered key so the valid keys are listed
            key = "" if key is None else str(key)
        return ToolResponse(self.registry.resolve(namespace, key))

    def get_core_standard(self, standard: str) -> ToolResponse:
        return self.dispatch(Operation.GET_CORE_STANDARD.value, {"standard": standard})

    def get_workflow_pattern(self, pattern: str) -> ToolResponse:
        return self.dispatch(Operation.GET_WORKFLOW_PATTERN.value, {"pattern": pattern})

    def get_integration_guide(self, tool: str) -> ToolResponse:
        return self.dispatch(Operation.GET_INTEGRATION_GUIDE.value, {"tool": tool})

    def search_standards(
        self,
        keyword: Any,
        max_results: Optional[int] = None,
        context_lines: Optional[int] = None,
    ) -> ToolResponse:
        """Search every document and format the hits as a markdown report."""
        try:
            results = search(self.registry, keyword, max_results, context_lines)
        except StandardsError as e:
            return ToolResponse.error(str(e))
        return ToolResponse(format_results(results, keyword))

    def list_available_standards(self) -> ToolResponse:
        """Describe every fetchable document, grouped by namespace."""
        output = ["# Available Standards", ""]

        for namespace, heading, operation in _LISTING_SECTIONS:
            output.append(f"## {heading}")
            output.append("")
            output.append(f"Use `{operation.value}` to retrieve these:")
            output.append("")
            for entry in self.registry.entries(namespace):
                output.append(f"- **{entry.key}**: {entry.description}")
            output.append("")

        output.append("## Search")
        output.append("")
        output.append(
            f"Use `{Operation.SEARCH_STANDARDS.value}` to search across all files by keyword."
        )

        return ToolResponse("\n".join(output) + "\n")
