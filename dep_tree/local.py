"""Listing and content provider for a repository checked out on disk."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalRepository:
    """Serve a directory through the same listing/content interface as GitHub."""

    def __init__(self, root: Path, skip_dirs: list[str] | None = None):
        self.root = Path(root)
        self.skip_dirs = skip_dirs or [
            "node_modules", ".git", "__pycache__", "build", "dist",
            ".next", ".venv", "venv", "env",
        ]

    def list_files(self) -> list[str]:
        """Repository-relative posix paths of every file, sorted."""
        files: list[str] = []
        for path in sorted(self.root.rglob("*")):
            if path.is_dir():
                continue
            rel = path.relative_to(self.root)
            if self._should_skip(rel):
                continue
            files.append(rel.as_posix())
        return files

    def read(self, path: str) -> str | None:
        """Text of *path*, or ``None`` when it is missing or not UTF-8."""
        try:
            return (self.root / path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", path, e)
            return None

    def _should_skip(self, rel: Path) -> bool:
        for part in rel.parts[:-1]:
            for pattern in self.skip_dirs:
                if fnmatch.fnmatch(part, pattern):
                    return True
        return False
