"""
Keyword search across the standards documents.

A plain case-insensitive substring scan, line by line, over every document
the registry knows about. The corpus is a few dozen markdown files, so
there is no index: each search re-reads the files and stops as soon as
the result cap is hit.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import DocumentNotFoundError, InvalidArgumentError
from .fs import split_lines
from .registry import DocumentRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10
DEFAULT_CONTEXT_LINES = 2


@dataclass(frozen=True)
class SearchMatch:
    """One line that contains the query, with its surrounding context."""
    path: str
    line_number: int
    matched_line: str
    context: str


def search(
    registry: DocumentRegistry,
    query: str,
    max_results: Optional[int] = None,
    context_lines: Optional[int] = None,
) -> list[SearchMatch]:
    """
    Search all documents for a keyword or phrase.

    Documents are scanned in registry order and lines in file order, so
    the same query over the same files always yields the same list.
    A document that can't be read is skipped rather than failing the
    whole search.

    Args:
        registry: Registry providing the document list and root.
        query: Substring to look for (case-insensitive).
        max_results: Hard cap on matches across all documents (default: 10).
        context_lines: Lines of context before and after each match (default: 2).

    Returns:
        Matches in registry/line order; empty if nothing matched.

    Raises:
        InvalidArgumentError: If the query is empty or the limits are out of range.
    """
    if not isinstance(query, str) or not query.strip():
        raise InvalidArgumentError(
            "keyword parameter is required and must not be empty"
        )

    if max_results is None:
        max_results = DEFAULT_MAX_RESULTS
    if context_lines is None:
        context_lines = DEFAULT_CONTEXT_LINES

    if max_results < 1:
        raise InvalidArgumentError(f"maxResults must be at least 1, got {max_results}")
    if context_lines < 0:
        raise InvalidArgumentError(f"contextLines must not be negative, got {context_lines}")

    needle = query.lower()
    results: list[SearchMatch] = []

    for relative_path in registry.search_paths():
        try:
            content = registry.read(relative_path)
        except DocumentNotFoundError as e:
            logger.debug(f"Skipping unreadable document {relative_path}: {e}")
            continue

        lines = split_lines(content)
        last = len(lines) - 1

        for i, line in enumerate(lines):
            if needle not in line.lower():
                continue

            start = max(0, i - context_lines)
            end = min(last, i + context_lines)

            results.append(SearchMatch(
                path=relative_path,
                line_number=i + 1,
                matched_line=line.strip(),
                context="\n".join(lines[start:end + 1]),
            ))

            if len(results) >= max_results:
                return results

    return results


def format_results(results: list[SearchMatch], query: str) -> str:
    """Render matches as markdown: a header per match and a fenced context block."""
    if not results:
        return f'No results found for "{query}"'

    output = [f'Found {len(results)} result(s) for "{query}":', ""]

    for match in results:
        output.append(f"## {match.path}:{match.line_number}")
        output.append("")
        output.append("```")
        output.append(match.context)
        output.append("```")
        output.append("")

    return "\n".join(output) + "\n"
