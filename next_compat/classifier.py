"""Classify a Next.js routes manifest against Firebase Hosting."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, TypeVar

from next_compat.build_output import (
    IDocumentReader,
    has_unoptimized_image,
    uses_app_dir_router,
    uses_next_image,
)
from next_compat.constants import DEFAULT_DIST_DIRNAME
from next_compat.firebase import FirebaseHostingMapper, IHostingMapper
from next_compat.models import BuildFlags, CompatibilityReport, RoutesReport, RuleVerdict
from next_compat.repositories import BuildOutputRepository
from next_compat.routes import (
    PhasedRoutes,
    RuleKind,
    get_nextjs_rewrites_to_use,
    is_header_supported_by_firebase,
    is_redirect_supported_by_firebase,
    is_rewrite_supported_by_firebase,
    parse_routes_config,
)
from next_compat.routes.models import Rule
from next_compat.routes.parser import parse_headers, parse_redirects

logger = logging.getLogger(__name__)

UNSUPPORTED_REASON = "not expressible in Firebase Hosting"

RuleT = TypeVar("RuleT", bound=Rule)


def classify_routes(
    manifest: dict[str, Any], mapper: IHostingMapper | None = None
) -> RoutesReport:
    mapper = mapper or FirebaseHostingMapper()
    report = RoutesReport()

    config = parse_routes_config(manifest.get("rewrites"))
    report.rewrites = _partition(
        get_nextjs_rewrites_to_use(config),
        is_rewrite_supported_by_firebase,
        mapper.map_rewrite,
        report.verdicts,
    )
    if isinstance(config, PhasedRoutes):
        for phase, rules in (
            ("afterFiles", config.after_files),
            ("fallback", config.fallback),
        ):
            for rule in rules or ():
                logger.debug("dropping %s rewrite %s", phase, rule.source)
                report.verdicts.append(
                    RuleVerdict(
                        kind=RuleKind.REWRITE,
                        source=rule.source,
                        supported=False,
                        reason=f"{phase} phase runs after filesystem routes",
                    )
                )

    report.redirects = _partition(
        parse_redirects(manifest.get("redirects") or []),
        is_redirect_supported_by_firebase,
        mapper.map_redirect,
        report.verdicts,
    )
    report.headers = _partition(
        parse_headers(manifest.get("headers") or []),
        is_header_supported_by_firebase,
        mapper.map_header,
        report.verdicts,
    )
    return report


async def inspect_build(
    project_root: Path,
    dist_dir: str | Path = DEFAULT_DIST_DIRNAME,
    reader: IDocumentReader | None = None,
) -> BuildFlags:
    return BuildFlags(
        app_dir_router=uses_app_dir_router(project_root),
        next_image=await uses_next_image(dist_dir, project_root, reader),
        unoptimized_image=await has_unoptimized_image(dist_dir, project_root, reader),
    )


async def build_report(
    project_root: Path,
    dist_dir: str | Path = DEFAULT_DIST_DIRNAME,
    reader: IDocumentReader | None = None,
) -> CompatibilityReport:
    repository = BuildOutputRepository(project_root, dist_dir)
    routes = classify_routes(repository.load_routes_manifest())
    flags = await inspect_build(project_root, dist_dir, reader)
    return CompatibilityReport(routes=routes, flags=flags)


def _partition(
    rules: Iterable[RuleT],
    is_supported: Callable[[RuleT], bool],
    map_rule: Callable[[RuleT], dict[str, Any]],
    verdicts: list[RuleVerdict],
) -> list[dict[str, Any]]:
    mapped: list[dict[str, Any]] = []
    for rule in rules:
        supported = is_supported(rule)
        verdicts.append(
            RuleVerdict(
                kind=rule.kind,
                source=rule.source,
                supported=supported,
                reason="" if supported else UNSUPPORTED_REASON,
            )
        )
        if supported:
            mapped.append(map_rule(rule))
        else:
            logger.debug("skipping unsupported %s %s", rule.kind.value, rule.source)
    return mapped
