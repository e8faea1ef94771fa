"""Chain traversal: BFS outward from a target over the reverse dependency index."""

from __future__ import annotations

import logging
from collections import deque

from dep_tree.analysis.graph_models import ReverseDependencyIndex
from dep_tree.models import DependentRecord, ImportEdge
from dep_tree.scanner.language_map import strip_source_extension

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Loose comparison form: forward slashes, no source extension, lowercase."""
    return strip_source_extension(path.replace("\\", "/")).lower()


def _exact_matches(key: str, target: str) -> bool:
    # Depth 0 only: the key as resolved, or the target written without its extension
    return key == target or key == strip_source_extension(target)


class ChainTraversal:
    """Breadth-first search over a :class:`ReverseDependencyIndex`.

    The visited set is keyed by ``(normalized path, depth)``, so a file may
    show up again at a greater depth through a longer chain but never twice
    at the same depth. Expansion stops once depth reaches the number of
    distinct importers in the index (no simple chain is longer), which keeps
    import cycles from running forever.
    """

    def __init__(self, index: ReverseDependencyIndex):
        self.index = index
        self._by_normalized: dict[str, list[ImportEdge]] = {}
        for key, edges in index.entries.items():
            self._by_normalized.setdefault(normalize_path(key), []).extend(edges)
        self.depth_bound = len({normalize_path(p) for p in index.importers()})

    def direct_dependents(self, file: str, depth: int) -> list[ImportEdge]:
        """Edges whose imported side matches *file* at the given depth."""
        if depth == 0:
            edges: list[ImportEdge] = []
            for key, key_edges in self.index.entries.items():
                if _exact_matches(key, file):
                    edges.extend(key_edges)
            return edges
        return self._by_normalized.get(normalize_path(file), [])

    def traverse(self, target: str, max_depth: int | None = None) -> list[DependentRecord]:
        bound = self.depth_bound
        if max_depth is not None:
            bound = min(bound, max_depth)

        records: list[DependentRecord] = []
        visited: set[tuple[str, int]] = {(normalize_path(target), 0)}
        queue: deque[DependentRecord] = deque([DependentRecord(file=target, depth=0, chain=[target])])

        while queue:
            current = queue.popleft()
            if current.depth >= bound:
                continue

            next_depth = current.depth + 1
            for edge in self.direct_dependents(current.file, current.depth):
                key = (normalize_path(edge.importer), next_depth)
                if key in visited:
                    continue
                visited.add(key)

                record = DependentRecord(
                    file=edge.importer,
                    depth=next_depth,
                    chain=current.chain + [edge.importer],
                )
                records.append(record)
                queue.append(record)

        logger.info("Found %d dependent record(s) of %s", len(records), target)
        return records


def traverse(
    index: ReverseDependencyIndex,
    target: str,
    max_depth: int | None = None,
) -> list[DependentRecord]:
    """All transitive dependents of *target*, in non-decreasing depth order."""
    return ChainTraversal(index).traverse(target, max_depth=max_depth)


def unique_dependents(records: list[DependentRecord]) -> list[DependentRecord]:
    """Keep the first (shallowest) record per file."""
    seen: set[str] = set()
    unique: list[DependentRecord] = []
    for record in records:
        if record.file in seen:
            continue
        seen.add(record.file)
        unique.append(record)
    return unique


def group_by_depth(records: list[DependentRecord]) -> dict[int, list[DependentRecord]]:
    grouped: dict[int, list[DependentRecord]] = {}
    for record in records:
        grouped.setdefault(record.depth, []).append(record)
    return dict(sorted(grouped.items()))
