# === FILE: docs_to_markdown/parser/html_parser.py ===
"""HTML parsing for the crawler.

The crawler only needs an *anchor view* of a page: every ``<a>`` element in
document order together with its ``href``. :func:`parse_html` provides that
view on top of BeautifulSoup's ``html.parser`` backend, which never raises on
broken markup; a page without anchors simply yields an empty list.

Anything with the :data:`HtmlParser` signature can replace it, which keeps the
link extractor testable with hand-built documents.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Callable, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("Anchor", "ParsedDocument", "HtmlParser", "parse_html")


@dataclass(slots=True, frozen=True)
class Anchor:
    """One ``<a>`` element and its raw ``href``, ``None`` when it has none."""

    href: Optional[str]


@dataclass(slots=True)
class ParsedDocument:
    """Lightweight representation of a parsed HTML page."""

    anchors: list[Anchor] = field(default_factory=list)

    def hrefs(self) -> list[str]:
        """Return the ``href`` of every anchor that has one, in document order."""
        return [a.href for a in self.anchors if a.href is not None]


HtmlParser = Callable[[str], ParsedDocument]


def parse_html(html: str) -> ParsedDocument:
    """Parse *html* into a :class:`ParsedDocument`, tolerating malformed markup."""
    soup = BeautifulSoup(html or "", "html.parser")

    anchors: list[Anchor] = []
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        href = href_val if isinstance(href_val, str) else None
        anchors.append(Anchor(href=href))

    return ParsedDocument(anchors=anchors)
