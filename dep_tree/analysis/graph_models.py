"""Data models for the reverse dependency index."""

from __future__ import annotations

from dataclasses import dataclass, field

from dep_tree.models import ImportEdge


@dataclass
class ReverseDependencyIndex:
    """imported path -> edges of the files importing it.

    Keys are the raw paths the extractor resolved, unnormalized; the
    traversal applies its own normalization on lookup.
    """
    entries: dict[str, list[ImportEdge]] = field(default_factory=dict)
    files_indexed: int = 0  # files whose content was obtained

    def add(self, edge: ImportEdge) -> None:
        self.entries.setdefault(edge.imported, []).append(edge)

    def get(self, imported: str) -> list[ImportEdge]:
        return self.entries.get(imported, [])

    def importers(self) -> set[str]:
        """Every distinct file that contributed at least one edge."""
        return {edge.importer for edges in self.entries.values() for edge in edges}

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.entries.values())

    def __contains__(self, imported: object) -> bool:
        return imported in self.entries

    def __len__(self) -> int:
        return len(self.entries)
