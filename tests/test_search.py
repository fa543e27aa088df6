"""
Tests for agentic_standards.search.

Covers ordering, the global result cap, context clamping, skipping of
unreadable documents, argument validation, and report formatting.
"""

from __future__ import annotations

import pytest

from agentic_standards.exceptions import InvalidArgumentError
from agentic_standards.registry import DocumentRegistry
from agentic_standards.search import SearchMatch, format_results, search


class TestSearch:
    """Test the linear keyword scan."""

    def test_finds_case_insensitive_matches(self, sample_registry: DocumentRegistry) -> None:
        results = search(sample_registry, "CLEAN BASH")

        assert [(r.path, r.line_number) for r in results] == [
            ("terminal-standards.md", 3),
            ("terminal-standards.md", 5),
        ]
        assert results[0].matched_line == "Agents need a clean bash environment."

    def test_registry_then_line_order(self, sample_registry: DocumentRegistry) -> None:
        results = search(sample_registry, "bash")

        assert [(r.path, r.line_number) for r in results] == [
            ("terminal-standards.md", 3),
            ("terminal-standards.md", 5),
            ("commit-conventions.md", 3),
            ("commit-conventions.md", 4),
            ("commit-conventions.md", 5),
        ]

    def test_repeated_searches_are_identical(self, sample_registry: DocumentRegistry) -> None:
        first = search(sample_registry, "feat", max_results=5, context_lines=1)
        second = search(sample_registry, "feat", max_results=5, context_lines=1)

        assert first == second
        assert format_results(first, "feat") == format_results(second, "feat")

    def test_max_results_is_global_cap(self, sample_registry: DocumentRegistry) -> None:
        results = search(sample_registry, "bash", max_results=1)

        assert len(results) == 1
        assert results[0].path == "terminal-standards.md"
        assert results[0].line_number == 3

    @pytest.mark.parametrize("cap", [1, 2, 3, 4])
    def test_never_exceeds_cap(self, sample_registry: DocumentRegistry, cap: int) -> None:
        assert len(search(sample_registry, "bash", max_results=cap)) == cap

    def test_no_match_returns_empty(self, sample_registry: DocumentRegistry) -> None:
        assert search(sample_registry, "zzz_no_such_token_zzz") == []

    def test_skips_deleted_document(self, make_corpus) -> None:
        registry = make_corpus({
            "terminal-standards.md": "Sign every commit.\n",
            "commit-conventions.md": "One commit per change.\n",
            "workflow-patterns/branch-strategy.md": "Squash commit on merge.\n",
        })
        (registry.root / "commit-conventions.md").unlink()

        results = search(registry, "commit")

        assert [r.path for r in results] == [
            "terminal-standards.md",
            "workflow-patterns/branch-strategy.md",
        ]

    def test_readme_is_searched_last(self, make_corpus) -> None:
        registry = make_corpus({
            "README.md": "The MCP server lives here.\n",
            "integration/claude-code.md": "Register the MCP server.\n",
        })

        results = search(registry, "mcp server")

        assert [r.path for r in results] == ["integration/claude-code.md", "README.md"]

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_rejects_blank_query(self, sample_registry: DocumentRegistry, query: str) -> None:
        with pytest.raises(InvalidArgumentError):
            search(sample_registry, query)

    def test_rejects_non_string_query(self, sample_registry: DocumentRegistry) -> None:
        with pytest.raises(InvalidArgumentError):
            search(sample_registry, None)  # type: ignore[arg-type]

    def test_rejects_zero_max_results(self, sample_registry: DocumentRegistry) -> None:
        with pytest.raises(InvalidArgumentError):
            search(sample_registry, "bash", max_results=0)

    def test_rejects_negative_context(self, sample_registry: DocumentRegistry) -> None:
        with pytest.raises(InvalidArgumentError):
            search(sample_registry, "bash", context_lines=-1)


class TestContextWindow:
    """Context snippets are clamped to the document's lines."""

    def test_match_on_first_line(self, make_corpus) -> None:
        registry = make_corpus({"terminal-standards.md": "Match first\nb\nc\nd\ne"})

        [match] = search(registry, "match first")

        assert match.line_number == 1
        assert match.context == "Match first\nb\nc"

    def test_match_on_last_line(self, make_corpus) -> None:
        registry = make_corpus({"terminal-standards.md": "a\nb\nc\nlast match"})

        [match] = search(registry, "last match")

        assert match.line_number == 4
        assert match.context == "b\nc\nlast match"

    def test_zero_context_lines(self, make_corpus) -> None:
        registry = make_corpus({"terminal-standards.md": "a\n  target line  \nc"})

        [match] = search(registry, "target", context_lines=0)

        assert match.context == "  target line  "
        assert match.matched_line == "target line"

    def test_context_larger_than_document(self, make_corpus) -> None:
        registry = make_corpus({"terminal-standards.md": "one\ntwo hit\nthree"})

        [match] = search(registry, "hit", context_lines=50)

        assert match.context == "one\ntwo hit\nthree"


class TestFormatResults:
    """Markdown rendering of search results."""

    def test_no_results_message(self) -> None:
        assert format_results([], "zzz") == 'No results found for "zzz"'

    def test_header_and_fenced_context(self) -> None:
        results = [
            SearchMatch("terminal-standards.md", 3, "clean bash", "a\nclean bash\nb"),
            SearchMatch("README.md", 1, "bash", "bash"),
        ]

        text = format_results(results, "bash")

        assert text == (
            'Found 2 result(s) for "bash":\n'
            "\n"
            "## terminal-standards.md:3\n"
            "\n"
            "```\n"
            "a\nclean bash\nb\n"
            "```\n"
            "\n"
            "## README.md:1\n"
            "\n"
            "```\n"
            "bash\n"
            "```\n"
            "\n"
        )
