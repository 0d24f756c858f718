"""RSS feed module tool implementations."""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from modules.rss_feed.client import FeedClient, entry_datetime, entry_summary
from shared.errors import InvalidParamsError

logger = structlog.get_logger()


def _parse_bound(value: str, field: str) -> datetime:
    """Parse an ISO 8601 filter bound; naive values are taken as UTC."""
    try:
        bound = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidParamsError(f"Invalid 'filter.{field}' date (expected ISO 8601): {value}") from e
    if bound.tzinfo is None:
        bound = bound.replace(tzinfo=timezone.utc)
    return bound


def _matches(entry: dict, needle: str) -> bool:
    summary = entry_summary(entry)
    haystacks = (summary["title"], summary["content"], summary["summary"])
    return any(needle in text.lower() for text in haystacks if text)


class RssFeedTools:
    """Tool implementations for reading RSS/Atom feeds."""

    def __init__(self, client: FeedClient):
        self.client = client

    async def fetch_feed(self, url: str, limit: int = 10) -> dict:
        """Feed metadata plus the most recent items."""
        parsed = await self.client.fetch(url)
        feed = parsed.feed
        return {
            "title": feed.get("title"),
            "description": feed.get("subtitle") or feed.get("description"),
            "link": feed.get("link"),
            "updated": feed.get("updated"),
            "items": [entry_summary(entry) for entry in parsed.entries[:limit]],
        }

    async def get_feed_items(self, url: str, limit: int = 10, filter: dict | None = None) -> list[dict]:
        """Feed items filtered by date window and search term."""
        filter = filter or {}
        after = _parse_bound(filter["after"], "after") if filter.get("after") else None
        before = _parse_bound(filter["before"], "before") if filter.get("before") else None
        search = (filter.get("search") or "").lower()

        parsed = await self.client.fetch(url)
        items = []
        for entry in parsed.entries:
            if after or before:
                published = entry_datetime(entry)
                # Undated entries never satisfy a date bound.
                if published is None:
                    continue
                if after and not published > after:
                    continue
                if before and not published < before:
                    continue
            if search and not _matches(entry, search):
                continue
            items.append(entry_summary(entry))
            if len(items) >= limit:
                break

        logger.info("feed_items_filtered", url=url, returned=len(items), total=len(parsed.entries))
        return items
