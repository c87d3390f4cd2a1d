from next_compat.routes.models import (
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
from next_compat.routes.parser import (
    parse_header,
    parse_redirect,
    parse_rewrite,
    parse_routes_config,
)
from next_compat.routes.phases import get_nextjs_rewrites_to_use
from next_compat.routes.support import (
    is_header_supported_by_firebase,
    is_redirect_supported_by_firebase,
    is_rewrite_supported_by_firebase,
)

__all__ = [
    "FlatRoutes",
    "Header",
    "HeaderEntry",
    "PhasedRoutes",
    "Redirect",
    "Rewrite",
    "RouteCondition",
    "RoutesConfig",
    "RuleKind",
    "get_nextjs_rewrites_to_use",
    "is_header_supported_by_firebase",
    "is_redirect_supported_by_firebase",
    "is_rewrite_supported_by_firebase",
    "parse_header",
    "parse_redirect",
    "parse_rewrite",
    "parse_routes_config",
]
