"""JavaScript/TypeScript import matchers using regex patterns."""

from __future__ import annotations

import re

from dep_tree.models import ImportKind
from dep_tree.scanner.base import BaseMatcher, ImportMatch
from dep_tree.scanner.resolve import resolve_specifier

# One binding: default name, { named, list } or * as ns
_BINDING = r"(\{[^}]+\}|\*\s+as\s+\w+|\w+)"

# import x from './a' / import { a, b } from "b" / import x, { y } from 'c' / import './side-effect'
_ES_IMPORT_RE = re.compile(
    r"\bimport\s+(?:type\s+)?"
    rf"(?:{_BINDING}(?:\s*,\s*{_BINDING})?\s+from\s+)?"
    r"""['"]([^'"]+)['"]"""
)
# const x = require('./a') / require("./polyfill")
_REQUIRE_RE = re.compile(
    r"(?:\b(?:const|let|var)\s+(\w+|\{[^}]+\})\s*=\s*)?"
    r"""\brequire\s*\(\s*['"]([^'"]+)['"]\s*\)"""
)


class _JsMatcher(BaseMatcher):
    def resolve(self, specifier: str, importer: str) -> str:
        return resolve_specifier(specifier, importer)


class EsImportMatcher(_JsMatcher):
    kind = ImportKind.IMPORT
    pattern = _ES_IMPORT_RE

    def match(self, line: str) -> ImportMatch | None:
        m = self.pattern.search(line)
        if not m:
            return None
        symbol = m.group(1) or m.group(2) or "default"
        return ImportMatch(kind=self.kind, specifier=m.group(3), symbol=symbol)


class RequireMatcher(_JsMatcher):
    kind = ImportKind.REQUIRE
    pattern = _REQUIRE_RE

    def match(self, line: str) -> ImportMatch | None:
        m = self.pattern.search(line)
        if not m:
            return None
        return ImportMatch(kind=self.kind, specifier=m.group(2), symbol=m.group(1) or "default")
