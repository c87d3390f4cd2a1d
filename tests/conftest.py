import sys
import json
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def write_json():
    def _write(path: Path, payload) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def routes_manifest() -> dict:
    return {
        "version": 3,
        "basePath": "",
        "rewrites": {
            "beforeFiles": [
                {"source": "/docs/:path*", "destination": "/documentation/:path*"},
                {"source": "/old/:id(\\d+)", "destination": "/new/:id"},
            ],
            "afterFiles": [{"source": "/after", "destination": "/files"}],
            "fallback": [{"source": "/:path*", "destination": "https://legacy.example.com/:path*"}],
        },
        "redirects": [
            {
                "source": "/:path+/",
                "destination": "/:path+",
                "permanent": True,
                "internal": True,
                "regex": "^(?:/((?:[^/]+?)(?:/(?:[^/]+?))*))/$",
            },
            {"source": "/home", "destination": "/", "permanent": True},
            {"source": "/promo", "destination": "/sale", "statusCode": 307},
        ],
        "headers": [
            {
                "source": "/static/**",
                "headers": [{"key": "Cache-Control", "value": "public, max-age=31536000"}],
            },
            {
                "source": "/blog/:slug",
                "headers": [{"key": "X-Slug", "value": ":slug"}],
            },
        ],
    }


@pytest.fixture
def built_project(project_root: Path, routes_manifest: dict, write_json) -> Path:
    dist = project_root / ".next"
    write_json(dist / "routes-manifest.json", routes_manifest)
    write_json(dist / "export-marker.json", {"version": 1, "isNextImageImported": True})
    write_json(dist / "images-manifest.json", {"version": 1, "images": {"unoptimized": False}})
    (project_root / "app").mkdir()
    return project_root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
