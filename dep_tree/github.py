"""Async GitHub client: repository listings via the trees API, raw file text."""

from __future__ import annotations

import logging
import re

import httpx

from dep_tree.cache import ListingCache
from dep_tree.errors import InvalidRepoUrlError, ListingFetchError
from dep_tree.models import AnalysisConfig, RepoInfo

logger = logging.getLogger(__name__)

_BLOB_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/([^/]+)/([^/]+)/blob/([^/]+)/(.+?)(?:[?#].*)?$"
)


def parse_github_url(url: str) -> RepoInfo:
    """Split a ``github.com/<owner>/<repo>/blob/<branch>/<path>`` URL.

    Raises:
        InvalidRepoUrlError: if *url* is not a file blob URL.
    """
    m = _BLOB_URL_RE.match(url.strip())
    if not m:
        raise InvalidRepoUrlError(f"Not a GitHub file URL: {url}")
    owner, repo, branch, file_path = m.groups()
    return RepoInfo(owner=owner, repo=repo, branch=branch, file_path=file_path)


class GitHubClient:
    """Listing and content provider backed by the GitHub API.

    Listings are served from *cache* while they are fresh.
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        cache: ListingCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or AnalysisConfig()
        self.cache = cache if cache is not None else ListingCache(self.config.cache_ttl)
        headers = {"Accept": "application/vnd.github+json"}
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        self.client = httpx.AsyncClient(
            timeout=self.config.timeout,
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    async def list_files(self, owner: str, repo: str, branch: str) -> list[str]:
        """Return every blob path in the repository tree at *branch*."""
        cache_key = f"{owner}/{repo}/{branch}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("Using cached listing for %s", cache_key)
            return cached

        url = f"{self.config.api_base_url}/repos/{owner}/{repo}/git/trees/{branch}"
        try:
            response = await self.client.get(url, params={"recursive": "1"})
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Listing fetch failed for %s: %s", cache_key, e)
            raise ListingFetchError(
                f"Failed to fetch repository structure for {cache_key}. "
                "You may need to authenticate for private repos."
            ) from e

        if data.get("truncated"):
            logger.warning("Tree listing for %s was truncated by GitHub", cache_key)

        files = [item["path"] for item in data.get("tree", []) if item.get("type") == "blob"]
        self.cache.set(cache_key, files)
        logger.info("Listed %d files in %s", len(files), cache_key)
        return files

    async def fetch_content(self, owner: str, repo: str, branch: str, path: str) -> str | None:
        """Return the raw text of *path*, or ``None`` if it cannot be fetched."""
        url = f"{self.config.raw_base_url}/{owner}/{repo}/{branch}/{path}"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Error fetching %s: %s", path, e)
            return None
        if response.status_code != 200:
            logger.debug("Fetching %s returned HTTP %d", path, response.status_code)
            return None
        return response.text

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
