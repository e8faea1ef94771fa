"""Python import matchers.

Line-based: a file with a syntax error still yields the imports on its
well-formed lines.
"""

from __future__ import annotations

import re

from dep_tree.models import ImportKind
from dep_tree.scanner.base import BaseMatcher, ImportMatch
from dep_tree.scanner.resolve import resolve_python_module

_FROM_IMPORT_RE = re.compile(r"^\s*from\s+([.\w]+)\s+import\s+(.+)")
_IMPORT_MODULE_RE = re.compile(r"^\s*import\s+([.\w]+)(?:\s+as\s+\w+)?")


class _PythonMatcher(BaseMatcher):
    def resolve(self, specifier: str, importer: str) -> str:
        return resolve_python_module(specifier, importer)


class FromImportMatcher(_PythonMatcher):
    kind = ImportKind.FROM_IMPORT
    pattern = _FROM_IMPORT_RE

    def match(self, line: str) -> ImportMatch | None:
        m = self.pattern.match(line)
        if not m:
            return None
        return ImportMatch(kind=self.kind, specifier=m.group(1), symbol=m.group(2).strip())


class ImportModuleMatcher(_PythonMatcher):
    kind = ImportKind.IMPORT_MODULE
    pattern = _IMPORT_MODULE_RE

    def match(self, line: str) -> ImportMatch | None:
        m = self.pattern.match(line)
        if not m:
            return None
        module = m.group(1)
        return ImportMatch(kind=self.kind, specifier=module, symbol=module)
