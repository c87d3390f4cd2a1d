from __future__ import annotations

from typing import Any

from next_compat.routes.models import FlatRoutes, PhasedRoutes, Rewrite, RoutesConfig
from next_compat.routes.parser import parse_rewrites, parse_routes_config


def get_nextjs_rewrites_to_use(config: RoutesConfig | Any) -> list[Rewrite]:
    """Linearize rewrites into the list Firebase Hosting can evaluate.

    A flat list is used as is. For the phased shape only ``beforeFiles`` is
    kept: ``afterFiles`` and ``fallback`` run after filesystem resolution,
    which Firebase rewrites cannot express. Raw phased input only has its
    ``beforeFiles`` entries parsed; the dropped phases are never inspected.
    """
    if isinstance(config, dict):
        before_files = config.get("beforeFiles")
        if not isinstance(before_files, list):
            return []
        return list(parse_rewrites(before_files))
    if not isinstance(config, (FlatRoutes, PhasedRoutes)):
        config = parse_routes_config(config)
    if isinstance(config, FlatRoutes):
        return list(config.rules)
    return list(config.before_files or ())
