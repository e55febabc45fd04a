"""
URL resolution, canonicalization and admission rules for the crawl engine.

The admission check is a best-effort heuristic kept deliberately permissive;
it is not a security boundary.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from site_mirror.errors import SeedParseError

__all__ = ("canonicalize", "resolve", "is_admissible", "parse_seed")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def canonicalize(url: str) -> str:
    """
    Return the canonical form of an absolute URL: lower-case scheme and host,
    no default port, no fragment, trailing slashes stripped. The query string
    is kept.
    """
    parsed = urlsplit(url)
    scheme = parsed.scheme.lower()
    netloc = parsed.netloc.lower()
    try:
        port = parsed.port
    except ValueError:
        port = None
    if port is not None and _DEFAULT_PORTS.get(scheme) == port:
        netloc = netloc.rsplit(":", 1)[0]
    rebuilt = urlunsplit((scheme, netloc, parsed.path, parsed.query, ""))
    return rebuilt.rstrip("/")


def resolve(base: str, href: str) -> Optional[str]:
    """
    Resolve *href* against the page URL *base* and canonicalize the result.

    Returns None when the href cannot be parsed (broken IPv6 literal, bad port).
    """
    try:
        absolute = urljoin(base, href.strip())
        parsed = urlsplit(absolute)
        # accessing the port validates it
        parsed.port
    except ValueError:
        return None
    return canonicalize(absolute)


def is_admissible(target: str, root_host: str) -> bool:
    """
    True if *target* may be crawled from a site rooted at *root_host*.

    Host must match exactly (no subdomains, port ignored), the path must not
    contain ``@`` and the scheme must start with ``http``.
    """
    try:
        parsed = urlsplit(target)
        host = parsed.hostname
    except ValueError:
        return False
    return (
        host is not None
        and host == root_host.lower()
        and "@" not in parsed.path
        and parsed.scheme.startswith("http")
    )


def parse_seed(raw: str) -> str:
    """Validate the seed URL and return its canonical form or raise SeedParseError."""
    text = raw.strip() if isinstance(raw, str) else ""
    if not text:
        raise SeedParseError(str(raw), "empty URL")
    try:
        parsed = urlsplit(text)
        host = parsed.hostname
        parsed.port
    except ValueError as exc:
        raise SeedParseError(text, str(exc)) from exc
    if parsed.scheme.lower() not in ("http", "https"):
        raise SeedParseError(text, "scheme must be http or https")
    if not host:
        raise SeedParseError(text, "missing host")
    return canonicalize(text)
