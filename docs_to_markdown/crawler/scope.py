# docs_to_markdown/crawler/scope.py
"""
Scope checks deciding which resolved links the crawler may follow.
"""
from __future__ import annotations

from typing import Literal
from urllib.parse import urlsplit

from docs_to_markdown.crawler.urls import domain_of

__all__ = ("ChildMatch", "same_domain", "is_child_page")

ChildMatch = Literal["prefix", "segment"]


def same_domain(url: str, base_domain: str) -> bool:
    """True if the host of *url* equals *base_domain* (case-insensitive, port ignored)."""
    host = domain_of(url)
    if not host:
        return False
    return host == base_domain.lower()


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


def is_child_page(url: str, seed_url: str, mode: ChildMatch = "prefix") -> bool:
    """
    Check whether *url* lies below *seed_url*.

    ``prefix`` (default) is a literal string-prefix test, so with seed
    ``http://x.com/doc`` both ``/doc/a`` and ``/docs`` match. ``segment``
    compares scheme and host and then whole path segments.
    """
    if mode == "prefix":
        return url.startswith(seed_url)
    if mode != "segment":
        raise ValueError(f"unknown child match mode: {mode!r}")

    try:
        candidate, seed = urlsplit(url), urlsplit(seed_url)
        same_origin = (
            candidate.scheme.lower() == seed.scheme.lower()
            and (candidate.hostname or "") == (seed.hostname or "")
            and candidate.port == seed.port
        )
    except ValueError:
        return False
    if not same_origin:
        return False
    seed_parts = _segments(seed.path)
    return _segments(candidate.path)[: len(seed_parts)] == seed_parts
