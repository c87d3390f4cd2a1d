"""Tests for the build output capability probes."""

from pathlib import Path
from typing import Any

import pytest

from next_compat.build_output import (
    IDocumentReader,
    JsonDocumentReader,
    has_unoptimized_image,
    uses_app_dir_router,
    uses_next_image,
)
from next_compat.errors import InvalidJsonFormatError, MissingArtifactError


class StubReader(IDocumentReader):
    def __init__(self, payload: Any) -> None:
        self.payload = payload
        self.paths: list[Path] = []

    async def read_json(self, path: Path) -> Any:
        self.paths.append(path)
        return self.payload


class FailingReader(IDocumentReader):
    async def read_json(self, path: Path) -> Any:
        raise PermissionError(f"denied: {path}")


# --- uses_app_dir_router ---


def test_uses_app_dir_router_false_when_missing(project_root: Path) -> None:
    assert uses_app_dir_router(project_root) is False


def test_uses_app_dir_router_true_when_present(project_root: Path) -> None:
    (project_root / "app").mkdir()
    assert uses_app_dir_router(project_root) is True


def test_uses_app_dir_router_ignores_plain_file(project_root: Path) -> None:
    (project_root / "app").write_text("", encoding="utf-8")
    assert uses_app_dir_router(project_root) is False


def test_uses_app_dir_router_accepts_str(project_root: Path) -> None:
    (project_root / "app").mkdir()
    assert uses_app_dir_router(str(project_root)) is True


# --- uses_next_image ---


@pytest.mark.anyio
async def test_uses_next_image_true_when_imported() -> None:
    reader = StubReader({"isNextImageImported": True})
    assert await uses_next_image(".next", "/site", reader) is True
    assert reader.paths == [Path("/site/.next/export-marker.json")]


@pytest.mark.anyio
async def test_uses_next_image_false_when_not_imported() -> None:
    reader = StubReader({"isNextImageImported": False})
    assert await uses_next_image(".next", "/site", reader) is False


@pytest.mark.anyio
async def test_uses_next_image_false_when_field_missing() -> None:
    assert await uses_next_image(".next", "/site", StubReader({"version": 1})) is False


@pytest.mark.anyio
async def test_uses_next_image_propagates_read_failure() -> None:
    with pytest.raises(PermissionError):
        await uses_next_image(".next", "/site", FailingReader())


# --- has_unoptimized_image ---


@pytest.mark.anyio
async def test_has_unoptimized_image_true_when_unoptimized() -> None:
    reader = StubReader({"images": {"unoptimized": True}})
    assert await has_unoptimized_image("out", "/site", reader) is True
    assert reader.paths == [Path("/site/out/images-manifest.json")]


@pytest.mark.anyio
async def test_has_unoptimized_image_false_when_optimized() -> None:
    reader = StubReader({"images": {"unoptimized": False}})
    assert await has_unoptimized_image("out", "/site", reader) is False


@pytest.mark.anyio
@pytest.mark.parametrize("payload", [{}, {"images": {}}, {"images": None}])
async def test_has_unoptimized_image_false_when_field_missing(payload) -> None:
    assert await has_unoptimized_image("out", "/site", StubReader(payload)) is False


# --- JsonDocumentReader ---


@pytest.mark.anyio
async def test_default_reader_reads_artifacts(project_root: Path, write_json) -> None:
    write_json(project_root / ".next" / "export-marker.json", {"isNextImageImported": True})
    write_json(
        project_root / ".next" / "images-manifest.json",
        {"images": {"unoptimized": True}},
    )

    assert await uses_next_image(".next", project_root) is True
    assert await has_unoptimized_image(".next", project_root) is True


@pytest.mark.anyio
async def test_default_reader_missing_file(project_root: Path) -> None:
    with pytest.raises(MissingArtifactError) as exc_info:
        await uses_next_image(".next", project_root)
    assert exc_info.value.path == project_root / ".next" / "export-marker.json"


@pytest.mark.anyio
async def test_default_reader_invalid_json(project_root: Path) -> None:
    path = project_root / ".next" / "images-manifest.json"
    path.parent.mkdir(parents=True)
    path.write_text("{bad json", encoding="utf-8")

    with pytest.raises(InvalidJsonFormatError):
        await JsonDocumentReader().read_json(path)
