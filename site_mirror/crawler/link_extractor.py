# site_mirror/crawler/link_extractor.py
"""
Link extraction for SiteMirror.
"""
from __future__ import annotations

from typing import Set, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from site_mirror.crawler.urls import resolve
from site_mirror.logger import logger


def extract_links(body: Union[bytes, str], base_url: str) -> Set[str]:
    """
    Return the unique canonical URLs referenced by ``<a href>`` tags in *body*.

    Hrefs are resolved against *base_url*, which must be the URL the document
    was actually served from. No filtering happens here; a document the parser
    rejects yields an empty set.
    """
    try:
        soup = BeautifulSoup(body, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.debug("Unparsable document at %s: %s", base_url, exc)
        return set()

    links: Set[str] = set()
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        target = resolve(base_url, href_val)
        if target is not None:
            links.add(target)
    return links
