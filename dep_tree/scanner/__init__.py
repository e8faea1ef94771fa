"""Import extractor: matcher registry and per-file dispatcher."""

from __future__ import annotations

from dep_tree.models import ImportEdge, Language
from dep_tree.scanner.base import BaseMatcher, ImportMatch
from dep_tree.scanner.js_scanner import EsImportMatcher, RequireMatcher
from dep_tree.scanner.language_map import language_for_path
from dep_tree.scanner.python_scanner import FromImportMatcher, ImportModuleMatcher

_JS_MATCHERS: tuple[BaseMatcher, ...] = (EsImportMatcher(), RequireMatcher())
_PYTHON_MATCHERS: tuple[BaseMatcher, ...] = (FromImportMatcher(), ImportModuleMatcher())

# Matchers applied to a file, keyed by the file's own language tag
MATCHERS: dict[Language, tuple[BaseMatcher, ...]] = {
    Language.JAVASCRIPT: _JS_MATCHERS,
    Language.TYPESCRIPT: _JS_MATCHERS,
    Language.JSX: _JS_MATCHERS,
    Language.TSX: _JS_MATCHERS,
    Language.PYTHON: _PYTHON_MATCHERS,
}

ALL_MATCHERS: tuple[BaseMatcher, ...] = _JS_MATCHERS + _PYTHON_MATCHERS


def matchers_for(file_path: str) -> tuple[BaseMatcher, ...]:
    """Matchers for a file; unknown extensions get every matcher."""
    language = language_for_path(file_path)
    if language is None:
        return ALL_MATCHERS
    return MATCHERS[language]


def extract_import_edges(content: str, file_path: str) -> list[ImportEdge]:
    """Parse *content* line by line and return one edge per recognised import.

    A line matched by several matchers yields several edges; duplicates are
    kept.
    """
    edges: list[ImportEdge] = []
    matchers = matchers_for(file_path)

    for line_no, line in enumerate(content.splitlines(), start=1):
        for matcher in matchers:
            found = matcher.match(line)
            if found is None:
                continue
            edges.append(ImportEdge(
                importer=file_path,
                imported=matcher.resolve(found.specifier, file_path),
                kind=found.kind,
                symbol=found.symbol,
                module=found.specifier,
                line=line_no,
            ))
    return edges


def extract_imports(content: str, file_path: str) -> list[str]:
    """Resolved paths imported by *file_path*, in line order."""
    return [edge.imported for edge in extract_import_edges(content, file_path)]


__all__ = [
    "ALL_MATCHERS",
    "BaseMatcher",
    "EsImportMatcher",
    "FromImportMatcher",
    "ImportMatch",
    "ImportModuleMatcher",
    "MATCHERS",
    "RequireMatcher",
    "extract_import_edges",
    "extract_imports",
    "matchers_for",
]
