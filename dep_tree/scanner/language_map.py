"""Shared extension/language tables for the extractor, builder and traversal."""

from __future__ import annotations

from dep_tree.errors import UnsupportedLanguageError
from dep_tree.models import Language, RepositoryFile

# Which file extensions are analysis candidates for each requested language
LANGUAGE_EXTENSIONS: dict[Language, tuple[str, ...]] = {
    Language.JAVASCRIPT: (".js", ".jsx", ".mjs"),
    Language.TYPESCRIPT: (".ts", ".tsx"),
    Language.PYTHON: (".py",),
    Language.JSX: (".jsx", ".js"),
    Language.TSX: (".tsx", ".ts"),
}

# Maps file extension -> language tag of a single file
EXT_TO_LANGUAGE: dict[str, Language] = {
    ".js": Language.JAVASCRIPT,
    ".mjs": Language.JAVASCRIPT,
    ".jsx": Language.JSX,
    ".ts": Language.TYPESCRIPT,
    ".tsx": Language.TSX,
    ".py": Language.PYTHON,
}

# A target tagged JSX/TSX is analysed against the wider JavaScript/TypeScript set
_TARGET_LANGUAGE: dict[Language, Language] = {
    Language.JSX: Language.JAVASCRIPT,
    Language.TSX: Language.TYPESCRIPT,
}

# Extensions stripped when paths are compared loosely
SOURCE_EXTENSIONS: tuple[str, ...] = tuple(EXT_TO_LANGUAGE)


def extension_of(path: str) -> str:
    """Return the lowercased extension of the last path segment, or ``""``."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return "." + name.rsplit(".", 1)[-1].lower()


def language_for_path(path: str) -> Language | None:
    return EXT_TO_LANGUAGE.get(extension_of(path))


def strip_source_extension(path: str) -> str:
    """Drop a trailing JS/TS/Python extension, matching case-insensitively."""
    lowered = path.lower()
    for ext in SOURCE_EXTENSIONS:
        if lowered.endswith(ext):
            return path[: -len(ext)]
    return path


def resolve_language(value: str | Language) -> Language:
    """Map a user-supplied language tag onto :class:`Language`.

    Raises:
        UnsupportedLanguageError: if the tag is not one of the supported set.
    """
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).strip().lower())
    except ValueError:
        raise UnsupportedLanguageError(str(value)) from None


def language_for_target(path: str) -> Language:
    """Analysis language implied by the target file's extension.

    Raises:
        UnsupportedLanguageError: if the extension is not a supported source type.
    """
    language = language_for_path(path)
    if language is None:
        raise UnsupportedLanguageError(extension_of(path) or path)
    return _TARGET_LANGUAGE.get(language, language)


def filter_files_by_language(paths: list[str], language: Language) -> list[RepositoryFile]:
    """Keep paths whose extension is relevant to *language*, preserving order.

    Each kept file is tagged with its own language, which may differ from
    *language* (``.jsx`` files in a javascript run are tagged ``jsx``).
    """
    relevant = LANGUAGE_EXTENSIONS[language]
    return [
        RepositoryFile(path=p, language=language_for_path(p))
        for p in paths
        if extension_of(p) in relevant
    ]
