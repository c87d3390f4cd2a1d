from typing import Final


DEFAULT_DIST_DIRNAME: Final[str] = ".next"
APP_DIRNAME: Final[str] = "app"

ROUTES_MANIFEST: Final[str] = "routes-manifest.json"
EXPORT_MARKER: Final[str] = "export-marker.json"
IMAGES_MANIFEST: Final[str] = "images-manifest.json"

ESCAPE_MARKER: Final[str] = "\\"

# Characters whose escaped form ("\(") is a literal in a Next.js path.
ESCAPABLE_CHARS: Final[frozenset[str]] = frozenset("(){}:+?*")

# Unescaped, these always mean regex to path-to-regexp.
REGEX_CHARS: Final[frozenset[str]] = frozenset("(){}+?")

GLOB_CHAR: Final[str] = "*"
MAX_GLOB_RUN: Final[int] = 2

FIREBASE_PERMANENT_REDIRECT: Final[int] = 301
FIREBASE_TEMPORARY_REDIRECT: Final[int] = 302

REDIRECT_STATUS_MAP: Final[dict[int, int]] = {
    301: FIREBASE_PERMANENT_REDIRECT,
    308: FIREBASE_PERMANENT_REDIRECT,
    302: FIREBASE_TEMPORARY_REDIRECT,
    307: FIREBASE_TEMPORARY_REDIRECT,
}

# Keys Next.js writes into routes-manifest.json that do not affect matching.
IGNORED_RULE_KEYS: Final[frozenset[str]] = frozenset({"regex"})
