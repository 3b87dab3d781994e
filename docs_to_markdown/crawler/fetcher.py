# docs_to_markdown/crawler/fetcher.py
"""
Fetcher module: a single-attempt HTTP GET returning the page body as text.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout
from docs_to_markdown.config import CrawlerConfig

__all__ = ("FetchError", "FetchFn", "Fetcher")

FetchFn = Callable[[str], Awaitable[str]]


class FetchError(Exception):
    """A recoverable, per-URL fetch failure (transport, timeout or HTTP status)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class Fetcher:
    """Fetch pages through one aiohttp session. No retries, no backoff.

    Use as an async context manager, or pass an existing *session* to reuse
    one the caller owns::

        async with Fetcher(config) as fetcher:
            html = await fetcher.fetch(url)
    """

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> str:
        """
        GET *url* and return the decoded body.

        Raises FetchError on connection problems, timeouts, undecodable
        bodies and any HTTP status of 400 or above.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status} {resp.reason or ''}".rstrip())
                return await resp.text()
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {self.config.timeout:g} s") from exc
        except (ClientError, UnicodeDecodeError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

    __call__ = fetch
