# === FILE: docs_to_markdown/converter.py ===
"""HTML → Markdown conversion with the crawler's fixed cleanup rules.

Cleanup happens on the parsed tree before markdownify runs, so text that was
escaped in the page (``&lt;div&gt;`` inside a code sample) always survives as
text and only real elements are ever removed or unwrapped.
"""
from __future__ import annotations

import re
from typing import Iterable, Sequence

from bs4 import BeautifulSoup, NavigableString
from bs4.element import Tag
from markdownify import markdownify

__all__: Sequence[str] = ("DEFAULT_REMOVE_NODES", "MarkdownConverter")

# Elements dropped together with their content before conversion.
DEFAULT_REMOVE_NODES: tuple[str, ...] = (
    "script",
    "style",
    "iframe",
    "button",
    "input",
    "select",
    "textarea",
)

# Elements markdownify has a Markdown rendering for.
_CONVERTED_TAGS = frozenset(
    {
        "a", "b", "blockquote", "br", "code", "del", "em", "h1", "h2", "h3",
        "h4", "h5", "h6", "hr", "i", "img", "kbd", "li", "ol", "p", "pre", "s",
        "samp", "strong", "sub", "sup", "ul", "table", "thead", "tbody", "tfoot",
        "tr", "td", "th", "caption", "dl", "dt", "dd", "figcaption",
    }
)

# Document and layout containers: markdownify renders their content as blocks.
_LAYOUT_TAGS = frozenset(
    {
        "html", "head", "body", "title", "div", "span", "section", "article",
        "main", "header", "footer", "nav", "aside", "figure",
    }
)

_BLANK_LINES_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")


def _is_remaining_tag(tag: Tag) -> bool:
    return tag.name not in _CONVERTED_TAGS and tag.name not in _LAYOUT_TAGS


def _keep_raw(tag: Tag) -> None:
    """Replace *tag* by its own markup as text, keeping its children converted."""
    markup = str(tag)
    tag.insert_before(NavigableString(markup[: markup.index(">") + 1]))
    if not tag.is_empty_element:
        tag.insert_after(NavigableString(f"</{tag.name}>"))
    tag.unwrap()


class MarkdownConverter:
    """Convert page HTML to Markdown after removing non-content elements.

    With *strip_tags* (default) elements without a Markdown equivalent are
    unwrapped and only their content is kept; without it their opening and
    closing tags are carried into the output verbatim.
    """

    def __init__(
        self,
        remove_nodes: Iterable[str] = DEFAULT_REMOVE_NODES,
        strip_tags: bool = True,
        heading_style: str = "ATX",
    ) -> None:
        self.remove_nodes = tuple(remove_nodes)
        self.strip_tags = strip_tags
        self.heading_style = heading_style

    def convert(self, html: str) -> str:
        soup = BeautifulSoup(html or "", "html.parser")
        if self.remove_nodes:
            for node in soup.find_all(list(self.remove_nodes)):
                node.decompose()

        for tag in soup.find_all(_is_remaining_tag):
            if self.strip_tags:
                tag.unwrap()
            else:
                _keep_raw(tag)

        markdown = markdownify(str(soup), heading_style=self.heading_style, escape_misc=False)
        return _BLANK_LINES_RE.sub("\n\n", markdown).strip()
