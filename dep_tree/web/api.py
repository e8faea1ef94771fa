"""FastAPI routes for the dep-tree web API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from dep_tree.errors import InvalidRepoUrlError, ListingFetchError, UnsupportedLanguageError
from dep_tree.github import parse_github_url
from dep_tree.models import Language, RepoInfo
from dep_tree.pipeline import analyze_github, select_language
from dep_tree.web.state import AppState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# --- Request models ---

class AnalyzeRequest(BaseModel):
    language: str | None = None
    url: str | None = None
    owner: str | None = None
    repo: str | None = None
    branch: str | None = None
    file_path: str | None = None


def _repo_info(req: AnalyzeRequest) -> RepoInfo:
    if req.url:
        return parse_github_url(req.url)
    if req.owner and req.repo and req.branch and req.file_path:
        return RepoInfo(owner=req.owner, repo=req.repo, branch=req.branch, file_path=req.file_path)
    raise InvalidRepoUrlError("Provide either url or owner, repo, branch and file_path")


# --- Endpoints ---

@router.get("/languages")
async def languages():
    return {"languages": [lang.value for lang in Language]}


@router.post("/analyze")
async def analyze(req: AnalyzeRequest, request: Request):
    app_state: AppState = request.app.state.dep_tree
    try:
        repo_info = _repo_info(req)
        language = select_language(req.language, repo_info.file_path)
    except (UnsupportedLanguageError, InvalidRepoUrlError) as e:
        raise HTTPException(400, str(e))

    client = app_state.new_client()
    try:
        result = await analyze_github(repo_info, language, client, config=app_state.config)
    except ListingFetchError as e:
        logger.error("Analysis error: %s", e)
        raise HTTPException(502, str(e))
    finally:
        await client.aclose()

    return result.to_dict()
