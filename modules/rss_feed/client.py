"""Feed fetching and parsing (httpx + feedparser)."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import feedparser
import httpx
import structlog

from shared.errors import CapabilityError

logger = structlog.get_logger()


def entry_datetime(entry: dict) -> datetime | None:
    """Publication time of an entry in UTC, falling back to its update time."""
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return datetime(*parsed[:6], tzinfo=timezone.utc)


def entry_summary(entry: dict) -> dict:
    """Flatten a feedparser entry into the fields returned to callers."""
    content = entry.get("content") or []
    return {
        "title": entry.get("title"),
        "link": entry.get("link"),
        "published": entry.get("published") or entry.get("updated"),
        "content": content[0].get("value") if content else None,
        "summary": entry.get("summary"),
    }


class FeedClient:
    """Downloads feeds over HTTP and parses them with feedparser."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "tool-adapters/0.1 (+rss)",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            transport=transport,
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        )

    async def fetch(self, url: str) -> feedparser.FeedParserDict:
        """Fetch and parse the feed at *url*."""
        resp = await self._http.get(url)
        resp.raise_for_status()

        headers = {"content-type": resp.headers.get("content-type", "")}
        parsed = await asyncio.to_thread(feedparser.parse, resp.content, response_headers=headers)
        if parsed.bozo and not parsed.entries and not parsed.feed:
            raise CapabilityError(f"Could not parse feed at {url}: {parsed.get('bozo_exception')}")

        logger.debug("feed_fetched", url=url, entries=len(parsed.entries))
        return parsed

    async def aclose(self) -> None:
        await self._http.aclose()
