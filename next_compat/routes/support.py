"""Which Next.js rules Firebase Hosting can express.

Firebase Hosting matches ``source`` with globs and named segments only and
has no request conditions, so every predicate starts from the same shared
constraint and then adds the checks specific to its rule kind.
"""

from __future__ import annotations

from urllib.parse import urlparse

from next_compat.constants import REDIRECT_STATUS_MAP
from next_compat.paths import named_segments, path_has_regex
from next_compat.routes.models import Header, Redirect, Rewrite, Rule


def is_rewrite_supported_by_firebase(rewrite: Rewrite) -> bool:
    return not (
        _fails_shared_constraint(rewrite)
        or is_remote_destination(rewrite.destination)
        or _has_query(rewrite.destination)
    )


def is_redirect_supported_by_firebase(redirect: Redirect) -> bool:
    return not (
        _fails_shared_constraint(redirect)
        or bool(redirect.internal)
        or firebase_redirect_type(redirect) is None
    )


def is_header_supported_by_firebase(header: Header) -> bool:
    if _fails_shared_constraint(header):
        return False
    params = set(named_segments(header.source))
    return not any(
        params.intersection(named_segments(entry.value)) for entry in header.headers
    )


def firebase_redirect_type(redirect: Redirect) -> int | None:
    """Map a Next.js redirect status onto Firebase's 301/302, if possible."""
    if redirect.status_code is not None:
        return REDIRECT_STATUS_MAP.get(redirect.status_code)
    if redirect.permanent is None:
        return None
    return REDIRECT_STATUS_MAP[308 if redirect.permanent else 307]


def is_remote_destination(destination: str) -> bool:
    try:
        parsed = urlparse(destination)
    except ValueError:
        return True
    if parsed.scheme:
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)
    return bool(parsed.netloc)


def _fails_shared_constraint(rule: Rule) -> bool:
    return (
        rule.has is not None
        or rule.missing is not None
        or bool(rule.extra)
        or path_has_regex(rule.source)
    )


def _has_query(destination: str) -> bool:
    return "?" in destination
