import pytest

from site_mirror.crawler.urls import canonicalize, is_admissible, parse_seed, resolve
from site_mirror.errors import SeedParseError


@pytest.mark.parametrize(
    "base,href,expected",
    [
        ("https://site.com/dir/page", "other", "https://site.com/dir/other"),
        ("https://site.com/dir/page", "../up/", "https://site.com/up"),
        ("https://site.com/a", "//site.com/b", "https://site.com/b"),
        ("http://site.com/a", "/b?x=1#frag", "http://site.com/b?x=1"),
        ("https://site.com/a", "#top", "https://site.com/a"),
        ("https://site.com/", "HTTPS://Site.COM/Path/", "https://site.com/Path"),
        ("https://site.com", "", "https://site.com"),
        ("https://site.com/a", "  /padded  ", "https://site.com/padded"),
        ("https://site.com/a", "mailto:x@site.com", "mailto:x@site.com"),
    ],
)
def test_resolve(base, href, expected):
    assert resolve(base, href) == expected


@pytest.mark.parametrize("href", ["http://[::1", "http://site.com:99999/"])
def test_resolve_unparsable_returns_none(href):
    assert resolve("https://site.com", href) is None


def test_trailing_slash_variants_share_identity():
    assert resolve("https://site.com", "/docs/") == resolve("https://site.com", "/docs")
    assert canonicalize("https://site.com/") == canonicalize("https://site.com")


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://site.com:443/a", "https://site.com/a"),
        ("http://Site.com:80/", "http://site.com"),
        ("http://site.com:443/a", "http://site.com:443/a"),
        ("https://site.com:8443/a", "https://site.com:8443/a"),
        ("https://user@site.com:443/a", "https://user@site.com/a"),
        ("http://[::1]:80/a", "http://[::1]/a"),
    ],
)
def test_canonicalize_drops_default_port(url, expected):
    assert canonicalize(url) == expected


@pytest.mark.parametrize(
    "target,admitted",
    [
        ("https://site.com/a", True),
        ("http://site.com/a", True),
        ("https://site.com:8443/a", True),
        ("https://other.com/b", False),
        ("https://www.site.com/a", False),
        ("mailto:x@site.com", False),
        ("ftp://site.com/c", False),
        ("javascript:void(0)", False),
        ("https://site.com/user@example", False),
    ],
)
def test_is_admissible(target, admitted):
    assert is_admissible(target, "site.com") is admitted


def test_admission_filter_on_discovered_links():
    discovered = [
        "https://site.com/a",
        "https://other.com/b",
        "mailto:x@site.com",
        "ftp://site.com/c",
    ]
    assert [u for u in discovered if is_admissible(u, "site.com")] == ["https://site.com/a"]


def test_parse_seed_canonicalizes():
    assert parse_seed("  https://Site.com/  ") == "https://site.com"
    assert parse_seed("http://site.com/docs/#intro") == "http://site.com/docs"


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "not a url", "ftp://site.com", "http://[::1", "http:///path", "https://site.com:0x50/"],
)
def test_parse_seed_rejects(raw):
    with pytest.raises(SeedParseError):
        parse_seed(raw)


def test_seed_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_seed("mailto:someone@site.com")
