"""Tests for the web API."""

import httpx
import pytest

# Only run if fastapi is installed
try:
    from fastapi.testclient import TestClient
    from dep_tree.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

from dep_tree.github import GitHubClient
from dep_tree.models import AnalysisConfig

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

TREE = {"tree": [
    {"path": "src/a.js", "type": "blob"},
    {"path": "src/b.js", "type": "blob"},
    {"path": "src/c.js", "type": "blob"},
]}
RAW = {
    "/octo/demo/main/src/a.js": "export default 1;\n",
    "/octo/demo/main/src/b.js": "import x from './a'\n",
    "/octo/demo/main/src/c.js": "import y from './b'\n",
}


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.host == "api.github.com":
        if request.url.path.startswith("/repos/octo/demo/"):
            return httpx.Response(200, json=TREE)
        return httpx.Response(404)
    if request.url.path in RAW:
        return httpx.Response(200, text=RAW[request.url.path])
    return httpx.Response(404)


@pytest.fixture
def client():
    def factory(config, cache):
        return GitHubClient(config, cache, transport=httpx.MockTransport(_handler))

    app = create_app(config=AnalysisConfig(github_token="t"), client_factory=factory)
    return TestClient(app)


def test_languages(client):
    res = client.get("/api/languages")
    assert res.status_code == 200
    assert "python" in res.json()["languages"]


def test_analyze_by_url(client):
    res = client.post("/api/analyze", json={
        "url": "https://github.com/octo/demo/blob/main/src/a.js",
        "language": "javascript",
    })
    assert res.status_code == 200
    data = res.json()
    assert data["filesAnalyzed"] == 3
    assert data["repoInfo"] == {"owner": "octo", "repo": "demo", "branch": "main", "filePath": "src/a.js"}
    assert data["dependencies"] == [
        {"file": "src/b.js", "depth": 1, "chain": ["src/a.js", "src/b.js"]},
        {"file": "src/c.js", "depth": 2, "chain": ["src/a.js", "src/b.js", "src/c.js"]},
    ]


def test_analyze_by_fields(client):
    res = client.post("/api/analyze", json={
        "owner": "octo", "repo": "demo", "branch": "main",
        "file_path": "src/c.js", "language": "javascript",
    })
    assert res.status_code == 200
    assert res.json()["dependencies"] == []


def test_unsupported_language(client):
    res = client.post("/api/analyze", json={
        "url": "https://github.com/octo/demo/blob/main/src/a.js",
        "language": "ruby",
    })
    assert res.status_code == 400
    assert "ruby" in res.json()["detail"]


def test_analyze_language_inferred(client):
    res = client.post("/api/analyze", json={"url": "https://github.com/octo/demo/blob/main/src/a.js"})
    assert res.status_code == 200
    assert [d["file"] for d in res.json()["dependencies"]] == ["src/b.js", "src/c.js"]


def test_analyze_unknown_extension_without_language(client):
    res = client.post("/api/analyze", json={"url": "https://github.com/octo/demo/blob/main/README.md"})
    assert res.status_code == 400
    assert "Unsupported language" in res.json()["detail"]


def test_invalid_url(client):
    res = client.post("/api/analyze", json={"url": "https://github.com/octo/demo", "language": "javascript"})
    assert res.status_code == 400


def test_missing_repo_fields(client):
    res = client.post("/api/analyze", json={"owner": "octo", "language": "javascript"})
    assert res.status_code == 400


def test_listing_failure(client):
    res = client.post("/api/analyze", json={
        "url": "https://github.com/octo/private/blob/main/src/a.js",
        "language": "javascript",
    })
    assert res.status_code == 502
    assert "Failed to fetch repository structure" in res.json()["detail"]
