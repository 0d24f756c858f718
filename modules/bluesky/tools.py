"""Bluesky module tool implementations.

All account-scoped tools act on the identifier the client logged in with.
"""

from __future__ import annotations

from typing import Any

import structlog
from atproto import AsyncClient

logger = structlog.get_logger()


def _params(**kwargs: Any) -> dict[str, Any]:
    """Drop unset optional XRPC parameters."""
    return {k: v for k, v in kwargs.items() if v is not None}


class BlueskyTools:
    """Tool implementations backed by an authenticated atproto ``AsyncClient``."""

    def __init__(self, client: AsyncClient, actor: str):
        self.client = client
        self.actor = actor

    async def bluesky_get_profile(self):
        return await self.client.app.bsky.actor.get_profile(params=_params(actor=self.actor))

    async def bluesky_get_posts(self, limit: int = 50, cursor: str | None = None):
        return await self.client.app.bsky.feed.get_author_feed(
            params=_params(actor=self.actor, limit=limit, cursor=cursor)
        )

    async def bluesky_search_posts(self, query: str, limit: int = 25, cursor: str | None = None):
        return await self.client.app.bsky.feed.search_posts(
            params=_params(q=query, limit=limit, cursor=cursor)
        )

    async def bluesky_get_follows(self, limit: int = 50, cursor: str | None = None):
        return await self.client.app.bsky.graph.get_follows(
            params=_params(actor=self.actor, limit=limit, cursor=cursor)
        )

    async def bluesky_get_followers(self, limit: int = 50, cursor: str | None = None):
        return await self.client.app.bsky.graph.get_followers(
            params=_params(actor=self.actor, limit=limit, cursor=cursor)
        )

    async def bluesky_get_liked_posts(self, limit: int = 50, cursor: str | None = None):
        return await self.client.app.bsky.feed.get_actor_likes(
            params=_params(actor=self.actor, limit=limit, cursor=cursor)
        )

    async def bluesky_get_personal_feed(self, limit: int = 50, cursor: str | None = None):
        return await self.client.app.bsky.feed.get_timeline(
            params=_params(limit=limit, cursor=cursor)
        )

    async def bluesky_search_profiles(self, query: str, limit: int = 25, cursor: str | None = None):
        return await self.client.app.bsky.actor.search_actors(
            params=_params(q=query, limit=limit, cursor=cursor)
        )
