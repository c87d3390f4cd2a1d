"""next-compat: classify Next.js routing config for Firebase Hosting."""

from next_compat.build_output import (
    has_unoptimized_image,
    uses_app_dir_router,
    uses_next_image,
)
from next_compat.classifier import build_report, classify_routes, inspect_build
from next_compat.paths import clean_escaped_chars, path_has_regex
from next_compat.routes import (
    get_nextjs_rewrites_to_use,
    is_header_supported_by_firebase,
    is_redirect_supported_by_firebase,
    is_rewrite_supported_by_firebase,
)

__all__ = [
    "build_report",
    "classify_routes",
    "clean_escaped_chars",
    "get_nextjs_rewrites_to_use",
    "has_unoptimized_image",
    "inspect_build",
    "is_header_supported_by_firebase",
    "is_redirect_supported_by_firebase",
    "is_rewrite_supported_by_firebase",
    "path_has_regex",
    "uses_app_dir_router",
    "uses_next_image",
]
