"""Path pattern syntax helpers.

Next.js route sources are path-to-regexp patterns. Firebase Hosting only
understands globs and named segments (``/:slug``, ``/:path*``), so the
classifier needs to tell the two apart without compiling anything.

All helpers below are single left-to-right scans. A backslash escapes
the character after it, whatever that character is, so ``\\(`` is a
literal parenthesis and ``\\\\(`` is a literal backslash followed by a
real group.
"""

from __future__ import annotations

from next_compat.constants import (
    ESCAPABLE_CHARS,
    ESCAPE_MARKER,
    GLOB_CHAR,
    MAX_GLOB_RUN,
    REGEX_CHARS,
)


def path_has_regex(path: str) -> bool:
    """Return True when ``path`` uses regex syntax outside of escapes.

    Unescaped ``( ) { } + ?`` are regex. Runs of one or two ``*`` are glob
    tokens (``/*``, ``/**``, ``/:path*``); a run of three or more (``***``)
    is deliberately classified as regex, since no glob token has that form.
    """
    index = 0
    length = len(path)
    while index < length:
        char = path[index]

        if char == ESCAPE_MARKER:
            index += 2
            continue

        if char == GLOB_CHAR:
            run_end = index
            while run_end < length and path[run_end] == GLOB_CHAR:
                run_end += 1
            if run_end - index > MAX_GLOB_RUN:
                return True
            index = run_end
            continue

        if char in REGEX_CHARS:
            return True
        index += 1
    return False


def clean_escaped_chars(path: str) -> str:
    """Drop the escape marker in front of path-to-regexp special characters.

    Other escape pairs (``\\\\``, ``\\.``) are copied as they are, which keeps
    the function idempotent.
    """
    parts: list[str] = []
    index = 0
    length = len(path)
    while index < length:
        char = path[index]
        if char == ESCAPE_MARKER and index + 1 < length:
            escaped = path[index + 1]
            if escaped in ESCAPABLE_CHARS:
                parts.append(escaped)
            else:
                parts.append(char + escaped)
            index += 2
            continue
        parts.append(char)
        index += 1
    return "".join(parts)


def named_segments(path: str) -> list[str]:
    """Names of the unescaped ``:name`` segments in ``path``, in order."""
    names: list[str] = []
    index = 0
    length = len(path)
    while index < length:
        char = path[index]
        if char == ESCAPE_MARKER:
            index += 2
            continue
        if char == ":":
            name_end = index + 1
            while name_end < length and _is_name_char(path[name_end]):
                name_end += 1
            if name_end > index + 1:
                names.append(path[index + 1 : name_end])
            index = name_end
            continue
        index += 1
    return names


def _is_name_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())
