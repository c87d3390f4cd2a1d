from dataclasses import dataclass, field
from typing import Any

from next_compat.routes.models import RuleKind


@dataclass(frozen=True)
class RuleVerdict:
    kind: RuleKind
    source: str
    supported: bool
    reason: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "source": self.source,
            "supported": self.supported,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class BuildFlags:
    app_dir_router: bool
    next_image: bool
    unoptimized_image: bool

    def as_dict(self) -> dict[str, bool]:
        return {
            "app_dir_router": self.app_dir_router,
            "next_image": self.next_image,
            "unoptimized_image": self.unoptimized_image,
        }


@dataclass
class RoutesReport:
    rewrites: list[dict[str, Any]] = field(default_factory=list)
    redirects: list[dict[str, Any]] = field(default_factory=list)
    headers: list[dict[str, Any]] = field(default_factory=list)
    verdicts: list[RuleVerdict] = field(default_factory=list)

    @property
    def unsupported(self) -> list[RuleVerdict]:
        return [verdict for verdict in self.verdicts if not verdict.supported]

    def firebase_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {}
        if self.rewrites:
            config["rewrites"] = self.rewrites
        if self.redirects:
            config["redirects"] = self.redirects
        if self.headers:
            config["headers"] = self.headers
        return config

    def summary(self) -> dict[str, int]:
        counts = {kind.value: 0 for kind in RuleKind}
        for verdict in self.verdicts:
            if verdict.supported:
                counts[verdict.kind.value] += 1
        counts["rules"] = len(self.verdicts)
        counts["unsupported"] = len(self.unsupported)
        return counts


@dataclass
class CompatibilityReport:
    routes: RoutesReport
    flags: BuildFlags

    def as_dict(self) -> dict[str, Any]:
        return {
            "firebase": self.routes.firebase_config(),
            "unsupported": [verdict.as_dict() for verdict in self.routes.unsupported],
            "flags": self.flags.as_dict(),
        }
