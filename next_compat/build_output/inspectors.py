"""Capability probes over Next.js build output.

Each probe reads exactly one artifact. A missing *field* means False; a
failed *read* (missing file, broken JSON) propagates to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from next_compat.build_output.readers import IDocumentReader, JsonDocumentReader
from next_compat.constants import APP_DIRNAME, EXPORT_MARKER, IMAGES_MANIFEST


def uses_app_dir_router(project_root: str | Path) -> bool:
    return (Path(project_root) / APP_DIRNAME).is_dir()


async def uses_next_image(
    dist_dir: str | Path,
    project_root: str | Path,
    reader: IDocumentReader | None = None,
) -> bool:
    marker = await _read(reader, Path(project_root) / dist_dir / EXPORT_MARKER)
    return _field(marker, "isNextImageImported") is True


async def has_unoptimized_image(
    dist_dir: str | Path,
    project_root: str | Path,
    reader: IDocumentReader | None = None,
) -> bool:
    manifest = await _read(reader, Path(project_root) / dist_dir / IMAGES_MANIFEST)
    return _field(_field(manifest, "images"), "unoptimized") is True


async def _read(reader: IDocumentReader | None, path: Path) -> Any:
    return await (reader or JsonDocumentReader()).read_json(path)


def _field(document: Any, name: str) -> Any:
    if not isinstance(document, dict):
        return None
    return document.get(name)
