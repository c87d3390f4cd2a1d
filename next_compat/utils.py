import json
from pathlib import Path
from typing import Any

from next_compat.errors import InvalidJsonFormatError, MissingArtifactError


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_strict(path: Path) -> Any:
    if not path.is_file():
        raise MissingArtifactError(path)
    try:
        return read_json(path)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text
