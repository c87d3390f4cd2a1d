"""Typed Next.js routing rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class RuleKind(str, Enum):
    REWRITE = "rewrite"
    REDIRECT = "redirect"
    HEADER = "header"


class ConditionType(str, Enum):
    HEADER = "header"
    COOKIE = "cookie"
    QUERY = "query"
    HOST = "host"


@dataclass(frozen=True)
class RouteCondition:
    type: ConditionType
    key: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class HeaderEntry:
    key: str
    value: str


@dataclass(frozen=True)
class Rewrite:
    source: str
    destination: str
    has: tuple[RouteCondition, ...] | None = None
    missing: tuple[RouteCondition, ...] | None = None
    locale: bool | None = None
    base_path: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.REWRITE


@dataclass(frozen=True)
class Redirect:
    source: str
    destination: str
    status_code: int | None = None
    permanent: bool | None = None
    internal: bool | None = None
    has: tuple[RouteCondition, ...] | None = None
    missing: tuple[RouteCondition, ...] | None = None
    locale: bool | None = None
    base_path: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.REDIRECT


@dataclass(frozen=True)
class Header:
    source: str
    headers: tuple[HeaderEntry, ...] = ()
    has: tuple[RouteCondition, ...] | None = None
    missing: tuple[RouteCondition, ...] | None = None
    locale: bool | None = None
    base_path: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.HEADER


Rule = Union[Rewrite, Redirect, Header]


@dataclass(frozen=True)
class FlatRoutes:
    """Legacy shape: one ordered list of rewrites."""

    rules: tuple[Rewrite, ...] = ()


@dataclass(frozen=True)
class PhasedRoutes:
    """``beforeFiles`` / ``afterFiles`` / ``fallback`` shape."""

    before_files: tuple[Rewrite, ...] | None = None
    after_files: tuple[Rewrite, ...] | None = None
    fallback: tuple[Rewrite, ...] | None = None


RoutesConfig = Union[FlatRoutes, PhasedRoutes]
