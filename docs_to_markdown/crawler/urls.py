# docs_to_markdown/crawler/urls.py
"""
URL resolution helpers: turn the href of an anchor into an absolute URL.

Resolution is a pure string transformation. It does not touch the network and
does not canonicalise the result beyond what the rules below require, so the
same href on the same page always yields the same string.
"""
from __future__ import annotations

import posixpath
import re
from typing import Literal
from urllib.parse import urlsplit

__all__ = ("InvalidURLError", "RelativeBase", "resolve_url", "base_url_of", "domain_of")

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)

RelativeBase = Literal["dirname", "directory"]


class InvalidURLError(ValueError):
    """Raised when a URL has no scheme or host and cannot serve as a base."""

    def __init__(self, url: str, reason: str = "expected scheme://host") -> None:
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url


def _split_absolute(url: str):
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidURLError(url, str(exc)) from exc
    if not parts.scheme or not parts.netloc:
        raise InvalidURLError(url)
    return parts


def base_url_of(url: str) -> str:
    """Return ``scheme://netloc`` of an absolute *url*."""
    parts = _split_absolute(url)
    return f"{parts.scheme}://{parts.netloc}"


def domain_of(url: str) -> str:
    """Return the lower-cased host of *url*, or ``""`` when it has none."""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def _parent(path: str) -> str:
    """``dirname`` of *path*, ignoring a trailing slash and stopping at ``/``."""
    return posixpath.dirname(path.rstrip("/")) or "/"


def resolve_url(
    href: str, current_url: str, base_url: str, relative_base: RelativeBase = "dirname"
) -> str:
    """
    Resolve *href* found on *current_url* into an absolute URL.

    Rules, first match wins:

    1. ``scheme://...`` is already absolute and returned unchanged.
    2. ``//host/path`` is protocol-relative and gets an ``http:`` prefix.
    3. ``/path`` is root-relative and is appended to *base_url*.
    4. Anything else is relative to a directory of *current_url*. Each
       leading ``../`` climbs one directory (never above the host root) and
       each leading ``./`` is dropped.

    The directory used by rule 4 depends on *relative_base*. With
    ``"dirname"`` it is the parent of the current path, trailing slash
    ignored: ``guide`` on ``/docs/intro`` gives ``/docs/guide`` and on
    ``/docs/`` gives ``/guide``. With ``"directory"`` it is the path up to its
    last ``/``, as browsers do, so ``guide`` on ``/docs/`` gives
    ``/docs/guide``.

    Raises InvalidURLError when the URL needed as a base is not absolute, and
    ValueError for an unknown *relative_base*.
    """
    if relative_base not in ("dirname", "directory"):
        raise ValueError(f"unknown relative_base {relative_base!r}")

    if _SCHEME_RE.match(href):
        return href

    if href.startswith("//"):
        return "http:" + href

    if href.startswith("/"):
        _split_absolute(base_url)
        return base_url.rstrip("/") + href

    parts = _split_absolute(current_url)
    if relative_base == "dirname":
        directory = _parent(parts.path)
    else:
        directory = parts.path[: parts.path.rfind("/") + 1] or "/"

    while href.startswith(("../", "./")):
        if href.startswith("./"):
            href = href[2:]
            continue
        href = href[3:]
        directory = _parent(directory)

    if not directory.endswith("/"):
        directory += "/"
    return f"{parts.scheme}://{parts.netloc}{directory}{href}"
