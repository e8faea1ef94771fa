"""Tests for the import extractor."""

from dep_tree.models import ImportKind
from dep_tree.scanner import (
    ALL_MATCHERS,
    EsImportMatcher,
    FromImportMatcher,
    ImportModuleMatcher,
    RequireMatcher,
    extract_import_edges,
    extract_imports,
    matchers_for,
)
from dep_tree.scanner.resolve import resolve_python_module, resolve_specifier


# ── Resolution ────────────────────────────────────────────────

class TestResolve:
    def test_dot_slash_joins_importer_directory(self):
        assert resolve_specifier("./sibling", "a/b/x.js") == "a/b/sibling"

    def test_dot_dot_pops_one_segment(self):
        assert resolve_specifier("../sibling", "a/b/x.js") == "a/sibling"

    def test_multiple_dot_dot(self):
        assert resolve_specifier("../../lib/x", "a/b/c/file.ts") == "a/lib/x"

    def test_dot_dot_past_root(self):
        assert resolve_specifier("../../x", "a/file.js") == "x"

    def test_root_level_importer(self):
        assert resolve_specifier("./util", "index.js") == "util"

    def test_bare_specifier_unchanged(self):
        assert resolve_specifier("react", "src/app.js") == "react"
        assert resolve_specifier("src/lib/util", "src/app.js") == "src/lib/util"

    def test_backslashes_unified(self):
        assert resolve_specifier(".\\util", "src\\app.js") == "src/util"

    def test_python_dotted(self):
        assert resolve_python_module("pkg.mod", "main.py") == "pkg/mod.py"

    def test_python_relative_single_dot(self):
        assert resolve_python_module(".mod", "pkg/service.py") == "pkg/mod.py"

    def test_python_relative_parent(self):
        assert resolve_python_module("..core.base", "pkg/sub/x.py") == "pkg/core/base.py"

    def test_python_package_itself(self):
        assert resolve_python_module(".", "pkg/service.py") == "pkg/__init__.py"


# ── Matchers ──────────────────────────────────────────────────

class TestMatchers:
    def test_es_default_import(self):
        m = EsImportMatcher().match("import x from './a'")
        assert m.specifier == "./a"
        assert m.symbol == "x"
        assert m.kind == ImportKind.IMPORT

    def test_es_named_and_namespace(self):
        assert EsImportMatcher().match('import { a, b } from "./b";').symbol == "{ a, b }"
        assert EsImportMatcher().match("import * as ns from './c'").symbol == "* as ns"

    def test_es_default_plus_named(self):
        m = EsImportMatcher().match("import React, { useState } from 'react'")
        assert m.symbol == "React"
        assert m.specifier == "react"

    def test_es_side_effect_import(self):
        m = EsImportMatcher().match("import './polyfills'")
        assert m.specifier == "./polyfills"
        assert m.symbol == "default"

    def test_es_type_import(self):
        m = EsImportMatcher().match("import type { Props } from './types'")
        assert m.specifier == "./types"

    def test_require_with_binding(self):
        m = RequireMatcher().match("const { a } = require('./lib')")
        assert m.specifier == "./lib"
        assert m.symbol == "{ a }"
        assert m.kind == ImportKind.REQUIRE

    def test_bare_require(self):
        m = RequireMatcher().match("require('./setup');")
        assert m.specifier == "./setup"

    def test_python_from(self):
        m = FromImportMatcher().match("from pkg.mod import a, b")
        assert m.specifier == "pkg.mod"
        assert m.symbol == "a, b"

    def test_python_import_with_alias(self):
        m = ImportModuleMatcher().match("    import numpy.linalg as la")
        assert m.specifier == "numpy.linalg"

    def test_python_import_does_not_match_from_line(self):
        assert ImportModuleMatcher().match("from a import b") is None

    def test_partial_quote_not_matched(self):
        assert EsImportMatcher().match("import x from './a") is None
        assert RequireMatcher().match("const x = require(./a)") is None

    def test_matchers_selected_by_extension(self):
        assert all(isinstance(m, (FromImportMatcher, ImportModuleMatcher)) for m in matchers_for("a.py"))
        assert all(isinstance(m, (EsImportMatcher, RequireMatcher)) for m in matchers_for("a.tsx"))
        assert matchers_for("Makefile") == ALL_MATCHERS


# ── Extraction ────────────────────────────────────────────────

class TestExtractImports:
    def test_no_imports(self):
        assert extract_imports("const x = 1;\nconsole.log(x);\n", "src/a.js") == []
        assert extract_imports("", "src/a.py") == []

    def test_js_file(self):
        content = "import x from './a'\nconst y = require('../lib/b')\n"
        assert extract_imports(content, "src/app/main.js") == ["src/app/a", "src/lib/b"]

    def test_python_file(self):
        content = "import os\nfrom pkg.mod import thing\n"
        assert extract_imports(content, "main.py") == ["os.py", "pkg/mod.py"]

    def test_edge_metadata(self):
        content = "// header\nimport { a } from './util.js'\n"
        (edge,) = extract_import_edges(content, "src/b.js")
        assert edge.importer == "src/b.js"
        assert edge.imported == "src/util.js"
        assert edge.module == "./util.js"
        assert edge.symbol == "{ a }"
        assert edge.line == 2

    def test_line_matching_two_patterns_yields_two_edges(self):
        content = "import a from './a'; const b = require('./b');\n"
        edges = extract_import_edges(content, "src/x.js")
        assert [e.kind for e in edges] == [ImportKind.IMPORT, ImportKind.REQUIRE]
        assert [e.imported for e in edges] == ["src/a", "src/b"]

    def test_duplicate_edges_are_kept(self):
        content = "import a from './a'\nimport a2 from './a'\n"
        assert extract_imports(content, "src/x.js") == ["src/a", "src/a"]

    def test_unknown_extension_tries_everything(self):
        content = "import x from './a'\nfrom pkg import y\n"
        imported = extract_imports(content, "scripts/tool")
        assert "scripts/a" in imported
        assert "pkg.py" in imported

    def test_malformed_lines_ignored(self):
        content = "import {\n  a,\n} from './multi'\nimport x from \"./unterminated\n"
        assert extract_imports(content, "src/x.js") == []
