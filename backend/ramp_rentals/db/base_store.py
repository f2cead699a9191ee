"""
Base store — shared Supabase CRUD helpers.

All domain-specific stores inherit from this class to get
standardised insert / select / update / delete primitives.
"""

import logging
from typing import Any, Dict, List

from fastapi import HTTPException
from postgrest.exceptions import APIError

from ramp_rentals.clients.supabase_client import SupabaseClient

logger = logging.getLogger("base_store")


class BaseStore:
    """Base class for all Supabase stores providing shared CRUD operations."""

    def __init__(self, supabase_client: SupabaseClient) -> None:
        self._supabase_client = supabase_client

    @property
    def _client(self):
        """Get the Supabase client instance."""
        return self._supabase_client.client

    def _fail(self, action: str, table: str, error: APIError) -> HTTPException:
        logger.info("supabase error table=%s detail=%s", table, str(error))
        return HTTPException(
            status_code=500,
            detail=f"Supabase {action} {table} failed: {error}",
        )

    async def _insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert rows into a table and return the stored rows."""
        if not rows:
            return []
        try:
            response = self._client.table(table).insert(rows).execute()
            return response.data or []
        except APIError as e:
            raise self._fail("insert into", table, e)

    async def _select(
        self,
        table: str,
        columns: str = "*",
        filters: Dict[str, Any] | None = None,
        order_by: str | None = None,
        desc: bool = True,
        limit: int | None = None,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """Select rows from a table with optional equality filters, ordering and paging."""
        try:
            query = self._client.table(table).select(columns)
            if filters:
                for key, value in filters.items():
                    query = query.eq(key, value)
            if order_by:
                query = query.order(order_by, desc=desc)
            if limit is not None:
                query = query.range(offset, offset + limit - 1)
            response = query.execute()
            return response.data or []
        except APIError as e:
            raise self._fail("select from", table, e)

    async def _update(
        self, table: str, filters: Dict[str, Any], payload: Dict[str, Any]
    ) -> List[Dict[str, Any]]:
        """Update rows matching the filters and return the updated rows."""
        try:
            query = self._client.table(table).update(payload)
            for key, value in filters.items():
                query = query.eq(key, value)
            response = query.execute()
            return response.data or []
        except APIError as e:
            raise self._fail("update", table, e)

    async def _delete(self, table: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Delete rows matching the filters and return the deleted rows."""
        try:
            query = self._client.table(table).delete()
            for key, value in filters.items():
                query = query.eq(key, value)
            response = query.execute()
            return response.data or []
        except APIError as e:
            raise self._fail("delete from", table, e)

    async def _count(self, table: str, filters: Dict[str, Any] | None = None) -> int:
        """Exact row count for a table with optional equality filters."""
        try:
            query = self._client.table(table).select("id", count="exact")
            if filters:
                for key, value in filters.items():
                    query = query.eq(key, value)
            response = query.limit(1).execute()
            return response.count or 0
        except APIError as e:
            raise self._fail("count", table, e)
