"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from dep_tree.models import AnalysisConfig
from dep_tree.web.api import router
from dep_tree.web.state import AppState, ClientFactory


def create_app(
    config: AnalysisConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    app = FastAPI(title="dep-tree", version="0.1.0")
    app.state.dep_tree = AppState(config=config, client_factory=client_factory)
    app.include_router(router)
    return app
