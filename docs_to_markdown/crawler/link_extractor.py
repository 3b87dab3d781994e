# docs_to_markdown/crawler/link_extractor.py
"""
Link extraction for the crawler: which anchors on a page are worth following.
"""
from __future__ import annotations

import logging
from typing import List

from docs_to_markdown.crawler.scope import ChildMatch, is_child_page, same_domain
from docs_to_markdown.crawler.urls import InvalidURLError, RelativeBase, resolve_url
from docs_to_markdown.logger import LOGGER_NAME
from docs_to_markdown.parser.html_parser import HtmlParser, parse_html

__all__ = ("extract_links", "is_followable_href")

logger = logging.getLogger(LOGGER_NAME)


def is_followable_href(href: str) -> bool:
    """False for empty hrefs, ``javascript:`` pseudo-links and in-page fragments."""
    return bool(href) and not href.lower().startswith("javascript:") and not href.startswith("#")


def extract_links(
    html: str,
    current_url: str,
    *,
    base_url: str,
    base_domain: str,
    seed_url: str,
    child_pages_only: bool = False,
    child_match: ChildMatch = "prefix",
    relative_base: RelativeBase = "dirname",
    parse: HtmlParser = parse_html,
) -> List[str]:
    """
    Return absolute in-scope URLs linked from *html*, in document order.

    Links leaving *base_domain* are dropped. With *child_pages_only* a link
    must also lie below *seed_url*. Duplicates are kept; deduplication is up
    to the caller. *relative_base* picks how plain relative hrefs resolve
    (see resolve_url).
    """
    document = parse(html)
    logger.debug("Found %d links in %s", len(document.anchors), current_url)

    links: List[str] = []
    for href in document.hrefs():
        href = href.strip()
        if not is_followable_href(href):
            continue
        try:
            absolute = resolve_url(href, current_url, base_url, relative_base)
        except InvalidURLError as exc:
            logger.debug("Skipped unresolvable link %r: %s", href, exc)
            continue

        if not same_domain(absolute, base_domain):
            logger.debug("Skipped external link: %s", absolute)
            continue
        if child_pages_only and not is_child_page(absolute, seed_url, child_match):
            logger.debug("Skipped non-child page: %s", absolute)
            continue
        links.append(absolute)
    return links
