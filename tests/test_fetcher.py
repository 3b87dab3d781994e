# File: tests/test_fetcher.py
# Fetcher and end-to-end runs against a local aiohttp server
from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from docs_to_markdown.config import CrawlerConfig
from docs_to_markdown.crawler.fetcher import FetchError, Fetcher
from docs_to_markdown.report import render_manifest
from docs_to_markdown.runner import run_crawl, scrape_url


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


# --------------------------------------------------------------------------- #
#                            Test-server fixtures                             #
# --------------------------------------------------------------------------- #


@pytest_asyncio.fixture
async def docs_server(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_root(_):
        return web.Response(
            text=(
                "<html><head><title>Home</title><script>var x = 1;</script></head><body>"
                "<h1>Welcome</h1>"
                '<a href="/docs/">Docs</a>'
                '<a href="http://other.com/">Elsewhere</a>'
                '<a href="#top">Top</a>'
                '<a href="javascript:void(0)">Menu</a>'
                "</body></html>"
            ),
            content_type="text/html",
        )

    async def handle_docs(_):
        return web.Response(
            text='<h1>Docs</h1><a href="docs/intro">Intro</a><a href="/missing">Broken</a><a href="/">Home</a>',
            content_type="text/html",
        )

    async def handle_intro(_):
        return web.Response(
            text='<h2>Intro</h2><p>Read <a href="../">the index</a>.</p>',
            content_type="text/html",
        )

    async def handle_agent(request):
        return web.Response(text=request.headers.get("User-Agent", ""), content_type="text/plain")

    async def handle_slow(_):
        await asyncio.sleep(2)
        return web.Response(text="<p>late</p>", content_type="text/html")

    app.router.add_get("/", handle_root)
    app.router.add_get("/docs/", handle_docs)
    app.router.add_get("/docs/intro", handle_intro)
    app.router.add_get("/slow", handle_slow)
    app.router.add_get("/agent", handle_agent)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


# --------------------------------------------------------------------------- #
#                                   Tests                                     #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_fetch_returns_body(docs_server: str):
    async with Fetcher(CrawlerConfig(user_agent="TestAgent/1.0")) as fetcher:
        html = await fetcher.fetch(f"{docs_server}/docs/")
    assert "<h1>Docs</h1>" in html


@pytest.mark.asyncio()
async def test_fetch_http_error(docs_server: str):
    async with Fetcher(CrawlerConfig()) as fetcher:
        with pytest.raises(FetchError) as info:
            await fetcher.fetch(f"{docs_server}/missing")
    assert info.value.url == f"{docs_server}/missing"
    assert "404" in info.value.reason


@pytest.mark.asyncio()
async def test_fetch_timeout(docs_server: str):
    async with Fetcher(CrawlerConfig(timeout=0.5)) as fetcher:
        with pytest.raises(FetchError) as info:
            await fetcher.fetch(f"{docs_server}/slow")
    assert "timed out" in info.value.reason


@pytest.mark.asyncio()
async def test_fetch_connection_refused(unused_tcp_port: int):
    async with Fetcher(CrawlerConfig(timeout=2.0)) as fetcher:
        with pytest.raises(FetchError):
            await fetcher.fetch(f"http://localhost:{unused_tcp_port}/")


@pytest.mark.asyncio()
async def test_fetch_invalid_url():
    async with Fetcher(CrawlerConfig()) as fetcher:
        with pytest.raises(FetchError):
            await fetcher.fetch("not-a-url")


@pytest.mark.asyncio()
async def test_fetch_requires_session():
    with pytest.raises(RuntimeError):
        await Fetcher(CrawlerConfig()).fetch("http://example.com/")


@pytest.mark.asyncio()
async def test_run_crawl_end_to_end(docs_server: str, tmp_path):
    out = tmp_path / "site"
    cfg = CrawlerConfig(output_dir=out, request_delay=0, max_pages=10, user_agent="TestAgent/1.0")

    summary = await run_crawl(f"{docs_server}/", cfg)

    assert [p.source_url for p in summary.pages] == [
        f"{docs_server}/",
        f"{docs_server}/docs/",
        f"{docs_server}/docs/intro",
    ]
    assert [f.url for f in summary.failures] == [f"{docs_server}/missing"]
    assert summary.pages_processed == 3
    assert summary.remaining == 0
    assert sorted(p.name for p in out.iterdir()) == ["docs_.md", "docs_intro.md", "index.md"]

    index = (out / "index.md").read_text(encoding="utf-8")
    assert "# Welcome" in index
    assert "var x" not in index
    assert "## Intro" in (out / "docs_intro.md").read_text(encoding="utf-8")

    manifest = json.loads(render_manifest(summary, tmp_path / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["pages_processed"] == 3
    assert manifest["pages"][0] == {"url": f"{docs_server}/", "filename": "index.md"}
    assert manifest["failures"][0]["url"] == f"{docs_server}/missing"


@pytest.mark.asyncio()
async def test_run_crawl_child_pages_only(docs_server: str, tmp_path):
    cfg = CrawlerConfig(output_dir=tmp_path, request_delay=0, child_pages_only=True)
    summary = await run_crawl(f"{docs_server}/docs/", cfg)
    assert [p.source_url for p in summary.pages] == [f"{docs_server}/docs/", f"{docs_server}/docs/intro"]
    assert summary.failures == []


@pytest.mark.asyncio()
async def test_run_crawl_page_limit(docs_server: str, tmp_path):
    cfg = CrawlerConfig(output_dir=tmp_path, request_delay=0, max_pages=1)
    summary = await run_crawl(f"{docs_server}/", cfg)
    assert summary.pages_processed == 1
    assert summary.remaining == 1
    assert summary.limit_reached


@pytest.mark.asyncio()
async def test_user_agent_header(docs_server: str):
    async with Fetcher(CrawlerConfig(user_agent="TestAgent/1.0")) as fetcher:
        assert await fetcher.fetch(f"{docs_server}/agent") == "TestAgent/1.0"


@pytest.mark.asyncio()
async def test_scrape_url(docs_server: str):
    markdown = await scrape_url(f"{docs_server}/docs/intro")
    assert markdown.startswith("## Intro")
    assert "[the index](../)" in markdown


@pytest.mark.asyncio()
async def test_scrape_url_failure(docs_server: str):
    with pytest.raises(FetchError):
        await scrape_url(f"{docs_server}/missing")
