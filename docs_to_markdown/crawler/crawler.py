# docs_to_markdown/crawler/crawler.py
from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque, List, Optional, Set

from docs_to_markdown.converter import MarkdownConverter
from docs_to_markdown.crawler.fetcher import FetchError, FetchFn
from docs_to_markdown.crawler.link_extractor import extract_links
from docs_to_markdown.crawler.models import (
    CrawlSession,
    CrawlState,
    CrawlSummary,
    PageFailure,
    PageResult,
)
from docs_to_markdown.crawler.scope import ChildMatch
from docs_to_markdown.crawler.urls import RelativeBase
from docs_to_markdown.logger import LOGGER_NAME
from docs_to_markdown.parser.html_parser import HtmlParser, parse_html
from docs_to_markdown.storage import ensure_output_dir, write_page

__all__ = ("MarkdownCrawler", "SleepFn")

SleepFn = Callable[[float], Awaitable[None]]


class MarkdownCrawler:
    """Breadth-first, same-domain crawler saving every page as Markdown.

    Pages are handled one at a time: fetch, convert, save, extract links,
    enqueue, then wait ``delay`` seconds. Every URL is fetched at most once
    and no more than ``session.max_pages`` pages are saved.
    """

    def __init__(
        self,
        session: CrawlSession,
        fetch: FetchFn,
        *,
        converter: Optional[MarkdownConverter] = None,
        parse: HtmlParser = parse_html,
        delay: float = 1.0,
        sleep: SleepFn = asyncio.sleep,
        child_match: ChildMatch = "prefix",
        relative_base: RelativeBase = "dirname",
        dedupe_queue: bool = False,
    ) -> None:
        self.session = session
        self._fetch = fetch
        self.converter = converter or MarkdownConverter()
        self._parse = parse
        self.delay = delay
        self._sleep = sleep
        self.child_match = child_match
        self.relative_base = relative_base
        self.dedupe_queue = dedupe_queue

        self.state = CrawlState.IDLE
        self.visited: Set[str] = set()
        self.queue: Deque[str] = deque([session.seed_url])
        self._queued: Set[str] = {session.seed_url}
        self.page_count = 0
        self.pages: List[PageResult] = []
        self.failures: List[PageFailure] = []
        self.logger = logging.getLogger(LOGGER_NAME)

    async def crawl(self) -> CrawlSummary:
        if self.state is not CrawlState.IDLE:
            raise RuntimeError(f"crawler is {self.state.value}, a crawl can only run once")

        ensure_output_dir(self.session.output_dir)
        self.state = CrawlState.RUNNING
        self._log_settings()
        start = time.monotonic()

        while self.queue and self.page_count < self.session.max_pages:
            url = self._dequeue()
            if url in self.visited:
                self.logger.debug("Already visited, skipping: %s", url)
                continue
            self.visited.add(url)
            self.logger.info("Crawling: %s with %d queued", url, len(self.queue))

            try:
                html = await self._fetch(url)
            except FetchError as exc:
                self.logger.error("Error crawling URL %s: %s", url, exc.reason)
                self.failures.append(PageFailure(url, exc.reason))
            else:
                try:
                    self._process(url, html)
                except OSError as exc:
                    reason = f"cannot save page: {exc}"
                    self.logger.error("Error saving URL %s: %s", url, reason)
                    self.failures.append(PageFailure(url, reason))

            await self._sleep(self.delay)

        self.state = CrawlState.COMPLETED
        summary = CrawlSummary(
            pages_processed=self.page_count,
            remaining=len(self.queue),
            max_pages=self.session.max_pages,
            pages=list(self.pages),
            failures=list(self.failures),
        )
        self._log_summary(summary, time.monotonic() - start)
        return summary

    def _process(self, url: str, html: str) -> PageResult:
        markdown = self.converter.convert(html)
        path = write_page(self.session.output_dir, url, markdown)

        links = extract_links(
            html,
            url,
            base_url=self.session.base_url,
            base_domain=self.session.base_domain,
            seed_url=self.session.seed_url,
            child_pages_only=self.session.child_pages_only,
            child_match=self.child_match,
            relative_base=self.relative_base,
            parse=self._parse,
        )
        for link in links:
            self._enqueue(link)

        self.page_count += 1
        result = PageResult(source_url=url, markdown=markdown, saved_filename=path.name)
        self.pages.append(result)
        return result

    def _enqueue(self, url: str) -> None:
        if url in self.visited:
            return
        if self.dedupe_queue and url in self._queued:
            return
        self.queue.append(url)
        if self.dedupe_queue:
            self._queued.add(url)

    def _dequeue(self) -> str:
        url = self.queue.popleft()
        if self.dedupe_queue:
            self._queued.discard(url)
        return url

    def _log_settings(self) -> None:
        s = self.session
        self.logger.info("Base URL: %s", s.base_url)
        self.logger.info("Base Domain: %s", s.base_domain)
        self.logger.info("Output Directory: %s", s.output_dir)
        self.logger.info("Maximum Pages to Crawl: %d", s.max_pages)
        self.logger.info("Child Pages Only: %s", "Yes" if s.child_pages_only else "No")

    def _log_summary(self, summary: CrawlSummary, duration: float) -> None:
        self.logger.info(
            "Crawling completed. Processed %d pages in %.2f s.", summary.pages_processed, duration
        )
        self.logger.info("URLs remaining in queue: %d", summary.remaining)
        if summary.failures:
            self.logger.info("Failed URLs: %d", len(summary.failures))
        if summary.limit_reached:
            self.logger.warning(
                "Maximum page limit (%d) reached. Increase the limit to crawl more pages.",
                summary.max_pages,
            )
