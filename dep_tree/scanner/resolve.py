"""Resolve import specifiers to repository-relative paths.

No filesystem probing happens here: a specifier written without an extension
resolves to a path without an extension, and ``"lodash"`` resolves to
``"lodash"``. Loose matching during traversal makes up for part of that.
"""

from __future__ import annotations


def directory_parts(file_path: str) -> list[str]:
    """Directory segments of *file_path*, with empty segments dropped."""
    parts = file_path.replace("\\", "/").split("/")[:-1]
    return [p for p in parts if p]


def resolve_specifier(specifier: str, importer: str) -> str:
    """Resolve a JS/TS module specifier written inside *importer*.

    ``./x`` is joined onto the importer's directory; each leading ``../``
    pops one directory segment first. Anything else is returned unchanged
    apart from separator cleanup.
    """
    spec = specifier.replace("\\", "/")
    if not spec.startswith(("./", "../")):
        return spec

    parts = directory_parts(importer)
    while True:
        if spec.startswith("./"):
            spec = spec[2:]
        elif spec.startswith("../"):
            if parts:
                parts.pop()
            spec = spec[3:]
        else:
            break

    if spec:
        parts.append(spec)
    return "/".join(parts)


def resolve_python_module(module: str, importer: str) -> str:
    """Turn a dotted Python module into a ``.py`` path.

    ``pkg.mod`` becomes ``pkg/mod.py``. Leading dots are relative to the
    importer's package: one dot is the package itself and each extra dot
    goes up one level. ``from . import x`` points at the package's
    ``__init__.py``.
    """
    stripped = module.lstrip(".")
    level = len(module) - len(stripped)

    if level == 0:
        return stripped.replace(".", "/") + ".py"

    parts = directory_parts(importer)
    for _ in range(level - 1):
        if parts:
            parts.pop()

    if stripped:
        parts.extend(stripped.split("."))
        return "/".join(parts) + ".py"
    return "/".join(parts + ["__init__.py"])
