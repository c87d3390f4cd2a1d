"""Parse raw routes-manifest entries into typed rules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from jsonschema import Draft202012Validator

from next_compat.constants import IGNORED_RULE_KEYS
from next_compat.errors import InvalidRouteConfigError
from next_compat.routes.models import (
    ConditionType,
    FlatRoutes,
    Header,
    HeaderEntry,
    PhasedRoutes,
    Redirect,
    Rewrite,
    RouteCondition,
    RoutesConfig,
    RuleKind,
)

_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"
_VALIDATORS: dict[RuleKind, Draft202012Validator] = {}

_COMMON_KEYS = frozenset({"source", "has", "missing", "locale", "basePath"})
_KNOWN_KEYS: dict[RuleKind, frozenset[str]] = {
    RuleKind.REWRITE: _COMMON_KEYS | {"destination"},
    RuleKind.REDIRECT: _COMMON_KEYS
    | {"destination", "statusCode", "permanent", "internal"},
    RuleKind.HEADER: _COMMON_KEYS | {"headers"},
}

_PHASE_KEYS = ("beforeFiles", "afterFiles", "fallback")


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def rule_validator(kind: RuleKind) -> Draft202012Validator:
    validator = _VALIDATORS.get(kind)
    if validator is None:
        schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
        schema["$ref"] = f"#/$defs/{kind.value}"
        validator = Draft202012Validator(schema)
        _VALIDATORS[kind] = validator
    return validator


def parse_rewrite(raw: Any) -> Rewrite:
    if isinstance(raw, Rewrite):
        return raw
    payload = _validated(raw, RuleKind.REWRITE)
    return Rewrite(
        source=payload["source"],
        destination=payload["destination"],
        has=_conditions(payload.get("has")),
        missing=_conditions(payload.get("missing")),
        locale=payload.get("locale"),
        base_path=payload.get("basePath"),
        extra=_extra(payload, RuleKind.REWRITE),
    )


def parse_redirect(raw: Any) -> Redirect:
    if isinstance(raw, Redirect):
        return raw
    payload = _validated(raw, RuleKind.REDIRECT)
    return Redirect(
        source=payload["source"],
        destination=payload["destination"],
        status_code=payload.get("statusCode"),
        permanent=payload.get("permanent"),
        internal=payload.get("internal"),
        has=_conditions(payload.get("has")),
        missing=_conditions(payload.get("missing")),
        locale=payload.get("locale"),
        base_path=payload.get("basePath"),
        extra=_extra(payload, RuleKind.REDIRECT),
    )


def parse_header(raw: Any) -> Header:
    if isinstance(raw, Header):
        return raw
    payload = _validated(raw, RuleKind.HEADER)
    return Header(
        source=payload["source"],
        headers=tuple(
            HeaderEntry(key=item["key"], value=item["value"])
            for item in payload["headers"]
        ),
        has=_conditions(payload.get("has")),
        missing=_conditions(payload.get("missing")),
        locale=payload.get("locale"),
        base_path=payload.get("basePath"),
        extra=_extra(payload, RuleKind.HEADER),
    )


def parse_rewrites(items: Iterable[Any]) -> tuple[Rewrite, ...]:
    return tuple(parse_rewrite(item) for item in items)


def parse_redirects(items: Iterable[Any]) -> tuple[Redirect, ...]:
    return tuple(parse_redirect(item) for item in items)


def parse_headers(items: Iterable[Any]) -> tuple[Header, ...]:
    return tuple(parse_header(item) for item in items)


def parse_routes_config(raw: Any) -> RoutesConfig:
    """Resolve the three legal ``rewrites`` shapes into a ``RoutesConfig``."""
    if isinstance(raw, (FlatRoutes, PhasedRoutes)):
        return raw
    if raw is None:
        return FlatRoutes()
    if isinstance(raw, (list, tuple)):
        return FlatRoutes(rules=parse_rewrites(raw))
    if isinstance(raw, dict):
        unknown = sorted(set(raw) - set(_PHASE_KEYS))
        if unknown:
            raise InvalidRouteConfigError(
                f"unknown rewrite phase(s): {', '.join(unknown)}"
            )
        return PhasedRoutes(
            before_files=_phase(raw, "beforeFiles"),
            after_files=_phase(raw, "afterFiles"),
            fallback=_phase(raw, "fallback"),
        )
    raise InvalidRouteConfigError("rewrites must be a list or a phased object")


def _phase(raw: dict[str, Any], key: str) -> tuple[Rewrite, ...] | None:
    items = raw.get(key)
    if items is None:
        return None
    if not isinstance(items, list):
        raise InvalidRouteConfigError(f"{key} must be a list")
    return parse_rewrites(items)


def _validated(raw: Any, kind: RuleKind) -> dict[str, Any]:
    error = next(iter(rule_validator(kind).iter_errors(raw)), None)
    if error is not None:
        raise InvalidRouteConfigError(f"{kind.value}: {format_schema_error(error)}")
    return raw


def _conditions(raw: list[dict[str, Any]] | None) -> tuple[RouteCondition, ...] | None:
    if raw is None:
        return None
    return tuple(
        RouteCondition(
            type=ConditionType(item["type"]),
            key=item.get("key"),
            value=item.get("value"),
        )
        for item in raw
    )


def _extra(payload: dict[str, Any], kind: RuleKind) -> dict[str, Any]:
    known = _KNOWN_KEYS[kind] | IGNORED_RULE_KEYS
    return {key: value for key, value in payload.items() if key not in known}
