"""
Wrappers that wire config, fetcher, converter and crawler together.
"""
from typing import Optional

from docs_to_markdown.config import CrawlerConfig
from docs_to_markdown.converter import MarkdownConverter
from docs_to_markdown.crawler.crawler import MarkdownCrawler
from docs_to_markdown.crawler.fetcher import Fetcher
from docs_to_markdown.crawler.models import CrawlSession, CrawlSummary


async def run_crawl(seed_url: str, cfg: CrawlerConfig) -> CrawlSummary:
    """
    Crawl from *seed_url* with the settings in *cfg* and return the summary.

    Parameters
    ----------
    seed_url : str
        Absolute URL the crawl starts from.
    cfg : CrawlerConfig
        Output directory, page budget, scope and politeness settings.

    Raises
    ------
    InvalidURLError
        *seed_url* has no scheme or host.
    OSError
        The output directory cannot be created.
    """
    session = CrawlSession.create(
        seed_url,
        output_dir=cfg.output_dir,
        child_pages_only=cfg.child_pages_only,
        max_pages=cfg.max_pages,
    )
    async with Fetcher(cfg) as fetcher:
        crawler = MarkdownCrawler(
            session,
            fetcher.fetch,
            converter=MarkdownConverter(),
            delay=cfg.request_delay,
            child_match=cfg.child_match,
            relative_base=cfg.relative_base,
            dedupe_queue=cfg.dedupe_queue,
        )
        return await crawler.crawl()


async def scrape_url(url: str, cfg: Optional[CrawlerConfig] = None) -> str:
    """Fetch a single page and return it as Markdown. FetchError propagates."""
    async with Fetcher(cfg or CrawlerConfig()) as fetcher:
        html = await fetcher.fetch(url)
    return MarkdownConverter().convert(html)


__all__ = ["run_crawl", "scrape_url"]
