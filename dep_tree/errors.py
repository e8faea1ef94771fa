"""Exception hierarchy for dep-tree.

Per-file fetch and parse problems are never raised; only failures that stop
an analysis from starting surface through these types.
"""

from __future__ import annotations


class DepTreeError(Exception):
    """Base exception for all dep-tree errors."""


class ListingFetchError(DepTreeError):
    """The repository file listing could not be obtained."""


class UnsupportedLanguageError(DepTreeError, ValueError):
    """The requested analysis language is outside the supported set."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class InvalidRepoUrlError(DepTreeError, ValueError):
    """A URL that does not point at a file blob on GitHub."""
