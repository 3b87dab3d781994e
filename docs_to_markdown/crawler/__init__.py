"""Crawl controller and the URL, scope, link and fetch helpers it drives."""

from docs_to_markdown.crawler.crawler import MarkdownCrawler
from docs_to_markdown.crawler.fetcher import FetchError, Fetcher
from docs_to_markdown.crawler.models import CrawlSession, CrawlState, CrawlSummary, PageResult
from docs_to_markdown.crawler.urls import InvalidURLError, resolve_url

__all__ = [
    "MarkdownCrawler",
    "Fetcher",
    "FetchError",
    "CrawlSession",
    "CrawlState",
    "CrawlSummary",
    "PageResult",
    "InvalidURLError",
    "resolve_url",
]
