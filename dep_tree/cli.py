"""Click CLI with analyze, local, imports, and serve subcommands."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import click

from dep_tree.analysis.traversal import group_by_depth, unique_dependents
from dep_tree.errors import DepTreeError
from dep_tree.github import GitHubClient, parse_github_url
from dep_tree.local import LocalRepository
from dep_tree.models import AnalysisConfig, AnalysisResult, Language, RepoInfo
from dep_tree.pipeline import analyze_github, analyze_local
from dep_tree.scanner import extract_import_edges

_LANGUAGE_CHOICES = [lang.value for lang in Language]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _render(result: AnalysisResult, as_json: bool, unique: bool) -> None:
    dependencies = unique_dependents(result.dependencies) if unique else result.dependencies

    if as_json:
        data = result.to_dict()
        data["dependencies"] = [d.to_dict() for d in dependencies]
        click.echo(json.dumps(data, indent=2))
        return

    if not dependencies:
        click.echo("No files found that import this file.")
        click.echo(click.style(f"Analysis completed for {result.files_analyzed} files", dim=True))
        return

    click.echo(f"\nFound {len(dependencies)} dependent(s) across {result.files_analyzed} files:\n")
    for depth, records in group_by_depth(dependencies).items():
        label = "Direct imports" if depth == 1 else f"Depth {depth}"
        click.echo(click.style(f"{label} ({len(records)})", fg="cyan", bold=True))
        for record in records:
            click.echo(f"  {click.style(record.file, fg='green')}")
            if depth > 1:
                click.echo(click.style("    " + " -> ".join(record.chain), dim=True))
        click.echo()


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """dep-tree: find every file that imports a given file."""
    _setup_logging(verbose)


@cli.command()
@click.argument("url_or_repo")
@click.argument("file_path", required=False)
@click.option("--branch", "-b", default="main", help="Branch (ignored when a blob URL is given)")
@click.option("--language", "-l", type=click.Choice(_LANGUAGE_CHOICES), help="Source language (default: inferred from the target extension)")
@click.option("--batch-size", type=click.IntRange(min=1), default=10, help="Concurrent fetches per batch")
@click.option("--max-depth", type=click.IntRange(min=1), help="Stop expanding chains beyond this depth")
@click.option("--token", envvar="GITHUB_TOKEN", default="", help="GitHub token (defaults to $GITHUB_TOKEN)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--unique", is_flag=True, help="Show each dependent once, at its shallowest depth")
def analyze(
    url_or_repo: str,
    file_path: str | None,
    branch: str,
    language: str | None,
    batch_size: int,
    max_depth: int | None,
    token: str,
    as_json: bool,
    unique: bool,
):
    """Analyze a GitHub repository.

    Pass either a blob URL (https://github.com/owner/repo/blob/branch/path)
    or OWNER/REPO followed by FILE_PATH.
    """
    try:
        if file_path is None:
            repo_info = parse_github_url(url_or_repo)
        else:
            owner, sep, repo = url_or_repo.partition("/")
            if not sep or not owner or not repo:
                raise click.UsageError("Expected OWNER/REPO before FILE_PATH")
            repo_info = RepoInfo(owner=owner, repo=repo, branch=branch, file_path=file_path)
    except DepTreeError as e:
        raise click.ClickException(str(e))

    config = AnalysisConfig(batch_size=batch_size, max_depth=max_depth, github_token=token)

    async def _run() -> AnalysisResult:
        async with GitHubClient(config) as client:
            return await analyze_github(repo_info, language, client, config=config)

    if not as_json:
        click.echo(f"Analyzing {repo_info.cache_key}:{repo_info.file_path}")
    try:
        result = asyncio.run(_run())
    except DepTreeError as e:
        raise click.ClickException(str(e))
    _render(result, as_json, unique)


@cli.command()
@click.argument("source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("target")
@click.option("--language", "-l", type=click.Choice(_LANGUAGE_CHOICES), help="Source language (default: inferred from the target extension)")
@click.option("--max-depth", type=click.IntRange(min=1), help="Stop expanding chains beyond this depth")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--unique", is_flag=True, help="Show each dependent once, at its shallowest depth")
def local(
    source_dir: Path,
    target: str,
    language: str | None,
    max_depth: int | None,
    as_json: bool,
    unique: bool,
):
    """Analyze a repository checked out in SOURCE_DIR."""
    config = AnalysisConfig(max_depth=max_depth)
    target_path = Path(target)
    if target_path.is_absolute():
        try:
            target = target_path.resolve().relative_to(source_dir.resolve()).as_posix()
        except ValueError:
            raise click.BadParameter(f"{target} is not inside {source_dir}", param_hint="TARGET")

    repository = LocalRepository(source_dir, skip_dirs=config.skip_dirs)
    try:
        result = asyncio.run(analyze_local(repository, target, language, config=config))
    except DepTreeError as e:
        raise click.ClickException(str(e))
    _render(result, as_json, unique)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".",
              help="Repository root used to make paths relative")
@click.option("--json", "as_json", is_flag=True, help="Print the edges as JSON")
def imports(file: Path, root: Path, as_json: bool):
    """List the imports recognised in FILE."""
    try:
        rel = file.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        rel = file.as_posix()

    content = file.read_text(encoding="utf-8", errors="replace")
    edges = extract_import_edges(content, rel)
    if as_json:
        click.echo(json.dumps([edge.to_dict() for edge in edges], indent=2))
        return
    if not edges:
        click.echo("No imports found.")
        return

    for edge in edges:
        click.echo(
            f"{click.style(f'L{edge.line}', dim=True):>12}  "
            f"{click.style(edge.kind.value, fg='yellow')}  "
            f"{edge.module} -> {click.style(edge.imported, fg='green')}"
        )


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'dep-tree[web]'"
        )

    from dep_tree.web import create_app

    click.echo(f"Starting dep-tree API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
