"""Dependency map builder: fetch candidate files in batches and index their imports."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Union

from dep_tree.analysis.graph_models import ReverseDependencyIndex
from dep_tree.scanner import extract_import_edges

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10

ContentFetcher = Callable[[str], Union[str, None, Awaitable[Union[str, None]]]]


class DependencyMapBuilder:
    """Build a :class:`ReverseDependencyIndex` from file contents.

    Args:
        batch_size: How many fetches run concurrently. A batch settles
            completely, failures included, before the next one starts.
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self.batch_size = batch_size

    async def build(self, fetch_content: ContentFetcher, files: list[str]) -> ReverseDependencyIndex:
        index = ReverseDependencyIndex()

        for start in range(0, len(files), self.batch_size):
            batch = files[start:start + self.batch_size]
            results = await asyncio.gather(
                *(self._fetch(fetch_content, path) for path in batch),
                return_exceptions=True,
            )

            # Index mutation happens here only, after the whole batch resolved
            for path, result in zip(batch, results):
                if isinstance(result, Exception):
                    logger.warning("Skipping %s: fetch failed: %s", path, result)
                    continue
                if isinstance(result, BaseException):
                    raise result
                if result is None:
                    logger.debug("Skipping %s: no content", path)
                    continue
                self.index_content(index, path, result)

            logger.debug(
                "Indexed batch %d-%d of %d files",
                start + 1, start + len(batch), len(files),
            )

        logger.info(
            "Built reverse index: %d files, %d targets, %d edges",
            index.files_indexed, len(index), index.edge_count,
        )
        return index

    def index_content(self, index: ReverseDependencyIndex, path: str, content: str) -> None:
        """Add the outgoing edges of one file to *index*."""
        for edge in extract_import_edges(content, path):
            index.add(edge)
        index.files_indexed += 1

    def build_from_contents(self, contents: dict[str, str | None]) -> ReverseDependencyIndex:
        """Synchronous build over contents that are already in memory."""
        index = ReverseDependencyIndex()
        for path, content in contents.items():
            if content is not None:
                self.index_content(index, path, content)
        return index

    @staticmethod
    async def _fetch(fetch_content: ContentFetcher, path: str) -> str | None:
        result = fetch_content(path)
        if inspect.isawaitable(result):
            result = await result
        return result
