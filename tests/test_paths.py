import pytest

from next_compat.paths import clean_escaped_chars, named_segments, path_has_regex


PATHS_WITH_REGEX = [
    r"/post/:slug(\d{1,})",
    r"/api-hello-regex/:first(.*)",
    "/some-old-path/:first(.*)",
    "/blog/:slug+",
    "/docs/:section?",
    "/feed{/:page}",
    "/files/***",
    r"/\\(group)",
]

PATHS_WITH_ESCAPED_CHARS = [
    r"/post\(someStringBetweenParentheses\)/:slug",
    r"/english\(default\)/:slug",
    r"/\(\)\{\}\:\+\?\*/:slug",
    r"/c\+\+/:version",
    r"/faq\?/:topic",
    r"/wild\*\*\*card",
]

PATHS_WITH_REGEX_AND_ESCAPED_CHARS = [
    r"/post/\(escapedparentheses\)/:slug(\d{1,})",
    r"/english\(default\)/:slug(.*)",
    r"/c\+\+/:version+",
    r"/faq\?/:topic?",
    r"/\{literal\}/{/:optional}",
]

PATHS_AS_GLOBS = [
    "/",
    "/*",
    "/**",
    "/blog/*",
    "/docs/**",
    "/**/*.png",
    "/:slug",
    "/blog/:slug",
    "/:path*",
    "/a/:b/:c*",
]


@pytest.mark.parametrize("path", PATHS_WITH_REGEX)
def test_path_has_regex_identifies_regex(path: str) -> None:
    assert path_has_regex(path) is True


@pytest.mark.parametrize("path", PATHS_WITH_ESCAPED_CHARS)
def test_path_has_regex_ignores_escaped_chars(path: str) -> None:
    assert path_has_regex(path) is False


@pytest.mark.parametrize("path", PATHS_WITH_REGEX_AND_ESCAPED_CHARS)
def test_path_has_regex_identifies_regex_next_to_escaped_chars(path: str) -> None:
    assert path_has_regex(path) is True


@pytest.mark.parametrize("path", PATHS_AS_GLOBS)
def test_path_has_regex_ignores_globs(path: str) -> None:
    assert path_has_regex(path) is False


def test_path_has_regex_trailing_backslash_is_literal() -> None:
    assert path_has_regex("/odd\\") is False


def test_clean_escaped_chars_removes_every_marker() -> None:
    test_path = r"/\(\)\{\}\:\+\?\*/:slug"

    cleaned = clean_escaped_chars(test_path)

    for char in "(){}:+?*":
        assert f"\\{char}" in test_path
        assert f"\\{char}" not in cleaned
    assert cleaned == "/(){}:+?*/:slug"
    assert path_has_regex(test_path) is False


def test_clean_escaped_chars_keeps_other_escapes() -> None:
    assert clean_escaped_chars(r"/file\.json") == r"/file\.json"
    assert clean_escaped_chars(r"/a\\(b") == r"/a\\(b"


def test_clean_escaped_chars_leaves_plain_paths_alone() -> None:
    assert clean_escaped_chars("/blog/:slug*") == "/blog/:slug*"


@pytest.mark.parametrize(
    "path",
    PATHS_WITH_REGEX
    + PATHS_WITH_ESCAPED_CHARS
    + PATHS_WITH_REGEX_AND_ESCAPED_CHARS
    + PATHS_AS_GLOBS
    + [r"/\\\(x", "\\", r"/a\\\\\*"],
)
def test_clean_escaped_chars_is_idempotent(path: str) -> None:
    once = clean_escaped_chars(path)
    assert clean_escaped_chars(once) == once


def test_named_segments() -> None:
    assert named_segments("/:lang/blog/:slug*") == ["lang", "slug"]
    assert named_segments(r"/time\:zone/:id") == ["id"]
    assert named_segments("https://example.com") == []
