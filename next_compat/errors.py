from pathlib import Path


class NextCompatError(Exception):
    """Base user-facing application error."""


class ArtifactFileError(NextCompatError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingArtifactError(ArtifactFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing build output artifact")


class InvalidJsonFormatError(ArtifactFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidArtifactSchemaError(ArtifactFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid artifact schema ({detail})")


class InvalidRouteConfigError(NextCompatError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid route config ({detail})")
