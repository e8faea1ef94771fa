"""In-memory state for the web API — no database required."""

from __future__ import annotations

from typing import Callable

from dep_tree.cache import ListingCache
from dep_tree.github import GitHubClient
from dep_tree.models import AnalysisConfig

ClientFactory = Callable[[AnalysisConfig, ListingCache], GitHubClient]


class AppState:
    """Config and listing cache shared by every request of one app instance."""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        client_factory: ClientFactory | None = None,
    ):
        self.config = config or AnalysisConfig()
        self.cache = ListingCache(self.config.cache_ttl)
        self._client_factory = client_factory or GitHubClient

    def new_client(self) -> GitHubClient:
        return self._client_factory(self.config, self.cache)
