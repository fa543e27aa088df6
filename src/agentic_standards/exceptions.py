"""
Exception hierarchy for the standards server.

Everything raised by the registry, the search engine and the filesystem
helpers derives from StandardsError so the dispatcher can turn any of
them into an error-flagged tool response.
"""

from typing import Iterable


class StandardsError(Exception):
    """Base class for all recoverable standards-server errors."""


class UnknownDocumentError(StandardsError):
    """A key was not registered in the requested namespace."""

    def __init__(self, label: str, key: str, available: Iterable[str]):
        self.label = label
        self.key = key
        self.available = list(available)
        super().__init__(
            f'Unknown {label} "{key}". Available: {", ".join(self.available)}'
        )


class DocumentNotFoundError(StandardsError):
    """A registered document is missing or unreadable on disk."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Standard file not found: {path}")


class InvalidArgumentError(StandardsError):
    """A tool argument was missing, empty or out of range."""
