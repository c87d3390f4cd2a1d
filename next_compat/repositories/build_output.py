from pathlib import Path
from typing import Any

from next_compat.constants import (
    DEFAULT_DIST_DIRNAME,
    EXPORT_MARKER,
    IMAGES_MANIFEST,
    ROUTES_MANIFEST,
)
from next_compat.errors import InvalidArtifactSchemaError
from next_compat.utils import read_json_strict


class BuildOutputRepository:
    def __init__(
        self, project_root: Path, dist_dir: str | Path = DEFAULT_DIST_DIRNAME
    ) -> None:
        self._project_root = project_root
        self._dist_dir = Path(dist_dir)

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def dist_dir(self) -> Path:
        return self._dist_dir

    @property
    def dist_path(self) -> Path:
        return self.project_root / self.dist_dir

    @property
    def routes_manifest_path(self) -> Path:
        return self.dist_path / ROUTES_MANIFEST

    @property
    def export_marker_path(self) -> Path:
        return self.dist_path / EXPORT_MARKER

    @property
    def images_manifest_path(self) -> Path:
        return self.dist_path / IMAGES_MANIFEST

    def load_routes_manifest(self) -> dict[str, Any]:
        payload = read_json_strict(self.routes_manifest_path)
        if not isinstance(payload, dict):
            raise InvalidArtifactSchemaError(
                self.routes_manifest_path, "must be a JSON object"
            )
        for key in ("redirects", "headers"):
            if key in payload and not isinstance(payload[key], list):
                raise InvalidArtifactSchemaError(
                    self.routes_manifest_path, f"{key} must be a list"
                )
        return payload
