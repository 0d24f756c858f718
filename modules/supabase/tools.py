"""Supabase module tool implementations."""

from __future__ import annotations

from typing import Any

import structlog
from postgrest.exceptions import APIError
from supabase import AsyncClient

from shared.errors import CapabilityError

logger = structlog.get_logger()


def _apply_filters(query, filters: dict[str, Any] | None):
    """Chain one equality filter per key."""
    for column, value in (filters or {}).items():
        query = query.eq(column, value)
    return query


async def _execute(query) -> Any:
    """Run a PostgREST request and return its rows."""
    try:
        response = await query.execute()
    except APIError as e:
        raise CapabilityError(e.message or str(e)) from e
    return response.data


class SupabaseTools:
    """Tool implementations backed by the async Supabase client."""

    def __init__(self, client: AsyncClient, sql_function: str = "execute_sql"):
        self.client = client
        self.sql_function = sql_function

    async def execute_sql(self, query: str) -> Any:
        """Run raw SQL via a Postgres function that takes a ``query`` argument."""
        return await _execute(self.client.rpc(self.sql_function, {"query": query}))

    async def query_data(
        self,
        table: str,
        select: str = "*",
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> Any:
        """Select rows with optional equality filters and limit."""
        query = _apply_filters(self.client.table(table).select(select), filters)
        if limit:
            query = query.limit(limit)
        return await _execute(query)

    async def insert_data(self, table: str, data: dict[str, Any]) -> Any:
        """Insert a row and return the stored representation."""
        rows = await _execute(self.client.table(table).insert(data))
        logger.info("supabase_rows_inserted", table=table)
        return rows

    async def update_data(self, table: str, data: dict[str, Any], filters: dict[str, Any]) -> Any:
        """Update the rows matched by *filters*."""
        if not filters:
            raise CapabilityError("Refusing to update without filters")
        rows = await _execute(_apply_filters(self.client.table(table).update(data), filters))
        logger.info("supabase_rows_updated", table=table, count=len(rows or []))
        return rows

    async def delete_data(self, table: str, filters: dict[str, Any]) -> Any:
        """Delete the rows matched by *filters*."""
        if not filters:
            raise CapabilityError("Refusing to delete without filters")
        rows = await _execute(_apply_filters(self.client.table(table).delete(), filters))
        logger.info("supabase_rows_deleted", table=table, count=len(rows or []))
        return rows

    async def rpc(self, function: str, params: dict[str, Any] | None = None) -> Any:
        """Call a Postgres function."""
        return await _execute(self.client.rpc(function, params or {}))
