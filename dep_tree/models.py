"""Data models for the dep-tree analysis pipeline."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Any


class Language(enum.Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JSX = "jsx"
    TSX = "tsx"


class ImportKind(enum.Enum):
    IMPORT = "import"
    REQUIRE = "require"
    FROM_IMPORT = "from-import"
    IMPORT_MODULE = "import-module"


@dataclass(frozen=True)
class RepositoryFile:
    """A file from the repository listing."""
    path: str
    language: Language | None = None


@dataclass(frozen=True)
class ImportEdge:
    """Directed edge ``importer -> imported`` produced by the import extractor."""
    importer: str
    imported: str
    kind: ImportKind
    symbol: str
    module: str  # raw specifier as written
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "importer": self.importer,
            "imported": self.imported,
            "type": self.kind.value,
            "symbol": self.symbol,
            "module": self.module,
            "line": self.line,
        }


@dataclass
class DependentRecord:
    """A file that depends on the target, with the chain leading back to it."""
    file: str
    depth: int
    chain: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "depth": self.depth, "chain": list(self.chain)}


@dataclass(frozen=True)
class RepoInfo:
    owner: str
    repo: str
    branch: str
    file_path: str

    @property
    def cache_key(self) -> str:
        return f"{self.owner}/{self.repo}/{self.branch}"

    def to_dict(self) -> dict[str, str]:
        return {
            "owner": self.owner,
            "repo": self.repo,
            "branch": self.branch,
            "filePath": self.file_path,
        }


@dataclass
class AnalysisResult:
    """Output of one analysis run."""
    repo_info: RepoInfo | None
    dependencies: list[DependentRecord] = field(default_factory=list)
    files_analyzed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "repoInfo": self.repo_info.to_dict() if self.repo_info else None,
            "dependencies": [d.to_dict() for d in self.dependencies],
            "filesAnalyzed": self.files_analyzed,
        }


@dataclass
class AnalysisConfig:
    """Configuration for fetching and analysis."""
    batch_size: int = 10
    cache_ttl: float = 300.0
    github_token: str = ""
    api_base_url: str = "https://api.github.com"
    raw_base_url: str = "https://raw.githubusercontent.com"
    timeout: float = 30.0
    max_depth: int | None = None
    skip_dirs: list[str] = field(default_factory=lambda: [
        "node_modules", ".git", "__pycache__", "build", "dist",
        ".next", ".venv", "venv", "env", ".eggs", "*.egg-info",
    ])

    def __post_init__(self):
        if not self.github_token:
            self.github_token = os.getenv("GITHUB_TOKEN", "")
