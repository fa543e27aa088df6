"""
Shared fixtures for standards server tests.

Builds a throwaway document root under tmp_path so each test controls
exactly which registered files exist and what they contain.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from agentic_standards.dispatch import ToolDispatcher
from agentic_standards.registry import DocumentRegistry

CorpusFactory = Callable[[dict[str, str]], DocumentRegistry]


@pytest.fixture()
def make_corpus(tmp_path: Path) -> CorpusFactory:
    """
    Return a factory that writes {relative_path: content} under tmp_path.

    Registered paths that aren't given are simply absent, which the
    search engine treats as unreadable and skips.
    """

    def _make(files: dict[str, str]) -> DocumentRegistry:
        for relative_path, content in files.items():
            target = tmp_path / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return DocumentRegistry(tmp_path)

    return _make


@pytest.fixture()
def sample_registry(make_corpus: CorpusFactory) -> DocumentRegistry:
    """
    A small corpus touching all three namespaces.

    Structure:
        terminal-standards.md          "clean bash" twice
        commit-conventions.md          commit rules, "bash" three times
        workflow-patterns/branch-strategy.md
        integration/cursor.md
    """
    return make_corpus({
        "terminal-standards.md": (
            "# Terminal Standards\n"
            "\n"
            "Agents need a clean bash environment.\n"
            "Set PAGER=cat.\n"
            "Always start from clean bash.\n"
        ),
        "commit-conventions.md": (
            "# Commit Conventions\n"
            "Use feat, fix and docs.\n"
            "bash hooks may lint each commit.\n"
            "Run bash scripts from the repo root.\n"
            "Never commit from a dirty bash session.\n"
        ),
        "workflow-patterns/branch-strategy.md": (
            "# Branch Strategy\n"
            "Use feat/ prefixes.\n"
        ),
        "integration/cursor.md": "# Cursor\nRules live in .cursor/rules/.\n",
    })


@pytest.fixture()
def dispatcher(sample_registry: DocumentRegistry) -> ToolDispatcher:
    return ToolDispatcher(sample_registry)
