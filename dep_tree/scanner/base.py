"""Abstract base import matcher."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass

from dep_tree.models import ImportKind


@dataclass(frozen=True)
class ImportMatch:
    """Fragment of an edge recognised on a single line."""
    kind: ImportKind
    specifier: str
    symbol: str


class BaseMatcher(abc.ABC):
    """Base class for line-oriented import matchers.

    A matcher only looks at one line at a time and never raises on text it
    does not understand.
    """

    kind: ImportKind
    pattern: re.Pattern[str]

    @abc.abstractmethod
    def match(self, line: str) -> ImportMatch | None:
        """Return the import recognised on *line*, if any."""

    @abc.abstractmethod
    def resolve(self, specifier: str, importer: str) -> str:
        """Resolve a matched specifier to a repository-relative path."""
