"""Analysis pipeline: list -> filter -> build reverse index -> traverse."""

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Union

from dep_tree.analysis.dependency_map import ContentFetcher, DependencyMapBuilder
from dep_tree.analysis.traversal import traverse
from dep_tree.errors import DepTreeError, ListingFetchError
from dep_tree.github import GitHubClient
from dep_tree.local import LocalRepository
from dep_tree.models import AnalysisConfig, AnalysisResult, Language, RepoInfo
from dep_tree.scanner.language_map import (
    filter_files_by_language,
    language_for_target,
    resolve_language,
)

logger = logging.getLogger(__name__)

ListingProvider = Callable[[], Union[list[str], Awaitable[list[str]]]]


def select_language(language: Language | str | None, target: str) -> Language:
    """Explicit *language* if given, else the one implied by *target*'s extension."""
    if language is None or language == "":
        return language_for_target(target)
    return resolve_language(language)


async def analyze_dependencies(
    repo_info: RepoInfo | None,
    target: str,
    language: Language | str | None,
    list_files: ListingProvider,
    fetch_content: ContentFetcher,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Find every file that transitively imports *target*.

    When *language* is ``None`` it is inferred from the target's extension.

    Raises:
        UnsupportedLanguageError: before anything is fetched.
        ListingFetchError: if the file listing cannot be obtained.
    """
    config = config or AnalysisConfig()
    lang = select_language(language, target)

    try:
        files = list_files()
        if inspect.isawaitable(files):
            files = await files
    except DepTreeError:
        raise
    except Exception as e:
        raise ListingFetchError(f"Failed to fetch repository structure: {e}") from e

    logger.info("Found %d files in repository", len(files))
    relevant = filter_files_by_language(files, lang)
    logger.info("Found %d relevant files for language: %s", len(relevant), lang.value)

    builder = DependencyMapBuilder(batch_size=config.batch_size)
    index = await builder.build(fetch_content, [f.path for f in relevant])
    dependencies = traverse(index, target, max_depth=config.max_depth)

    return AnalysisResult(
        repo_info=repo_info,
        dependencies=dependencies,
        files_analyzed=len(relevant),
    )


async def analyze_github(
    repo_info: RepoInfo,
    language: Language | str | None,
    client: GitHubClient,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Run the analysis against a GitHub repository."""
    owner, repo, branch = repo_info.owner, repo_info.repo, repo_info.branch
    # Gate the language before touching the network
    lang = select_language(language, repo_info.file_path)

    async def list_files() -> list[str]:
        return await client.list_files(owner, repo, branch)

    async def fetch_content(path: str) -> str | None:
        return await client.fetch_content(owner, repo, branch, path)

    return await analyze_dependencies(
        repo_info, repo_info.file_path, lang, list_files, fetch_content,
        config=config or client.config,
    )


async def analyze_local(
    repository: LocalRepository,
    target: str,
    language: Language | str | None,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Run the analysis over a directory on disk."""
    return await analyze_dependencies(
        None, target, language, repository.list_files, repository.read, config=config,
    )
