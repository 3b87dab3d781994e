# docs_to_markdown/crawler/models.py
"""
Data models for the crawler: the per-crawl session and what a crawl produces.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Union

from docs_to_markdown.crawler.urls import base_url_of, domain_of

__all__ = ("CrawlSession", "CrawlState", "PageResult", "PageFailure", "CrawlSummary")


@dataclass(slots=True, frozen=True)
class CrawlSession:
    """Immutable parameters of one crawl, derived from the seed URL."""

    seed_url: str
    base_url: str
    base_domain: str
    output_dir: Path
    child_pages_only: bool = False
    max_pages: int = 100

    @classmethod
    def create(
        cls,
        seed_url: str,
        output_dir: Union[str, Path] = "output",
        child_pages_only: bool = False,
        max_pages: int = 100,
    ) -> CrawlSession:
        """Build a session; raises InvalidURLError if *seed_url* is not absolute."""
        return cls(
            seed_url=seed_url,
            base_url=base_url_of(seed_url),
            base_domain=domain_of(seed_url),
            output_dir=Path(output_dir),
            child_pages_only=child_pages_only,
            max_pages=max_pages,
        )


class CrawlState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(slots=True)
class PageResult:
    """A page that was fetched, converted and saved."""

    source_url: str
    markdown: str
    saved_filename: str


@dataclass(slots=True)
class PageFailure:
    url: str
    reason: str


@dataclass(slots=True)
class CrawlSummary:
    """Outcome of a finished crawl."""

    pages_processed: int
    remaining: int
    max_pages: int
    pages: List[PageResult] = field(default_factory=list)
    failures: List[PageFailure] = field(default_factory=list)

    @property
    def limit_reached(self) -> bool:
        """True when the page budget stopped the crawl with URLs still queued."""
        return self.remaining > 0 and self.pages_processed >= self.max_pages
