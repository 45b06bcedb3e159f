# =============================================================================
# lib/database.py - Supabase Table Gateway
# =============================================================================
# Narrow select/insert/update/delete access to Supabase tables.
#
# Every table this service writes to is owned by a user. update() and
# delete() therefore take the owner's uid as a required argument and always
# put eq("uid", uid) first in the filter chain; there is no way to issue an
# unscoped mutation through this class.
#
# PostgREST errors are raised as DatabaseError carrying the caller's stage
# name, e.g. "delete photo_avatars".
#
# Usage:
#   db = Database(context)
#   db.delete("voices", uid=uid, filters=[eq("id", voice_id)], stage="delete voice record")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Sequence

from postgrest.exceptions import APIError

from app.exceptions import DatabaseError
from lib.clients import ServiceContext
from lib.filters import Filter, eq

logger = logging.getLogger(__name__)


class Database:
    """
    Gateway over the Supabase client held by a ServiceContext.

    The client is fetched from the context on every call, so a missing
    configuration surfaces as ConfigurationError on first use.
    """

    def __init__(self, context: ServiceContext):
        self._context = context

    @property
    def client(self) -> Any:
        return self._context.supabase

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def select(
        self,
        table: str,
        *,
        uid: str,
        columns: str = "*",
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        stage: str,
    ) -> list[dict[str, Any]]:
        """
        Fetch the rows of a user-owned table matching the filters.

        Returns:
            List of row dicts (empty if nothing matched)

        Raises:
            DatabaseError: If the query fails
        """
        query = self.client.table(table).select(columns)
        query = self._scope(query, uid, filters)
        if order_by:
            query = query.order(order_by, desc=descending)

        response = self._execute(query, table, stage)
        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} rows from {table} for {uid}")
        return rows

    def select_one(
        self,
        table: str,
        *,
        uid: str,
        columns: str = "*",
        filters: Sequence[Filter] = (),
        stage: str,
    ) -> dict[str, Any] | None:
        """
        Fetch the first matching row, or None if there is none.

        Raises:
            DatabaseError: If the query fails
        """
        query = self.client.table(table).select(columns)
        query = self._scope(query, uid, filters).limit(1)

        response = self._execute(query, table, stage)
        rows = response.data or []
        return rows[0] if rows else None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, table: str, row: dict[str, Any], *, stage: str) -> dict[str, Any] | None:
        """
        Insert one row and return it as stored (with generated id).

        Returns:
            The inserted row, or None if the store returned nothing

        Raises:
            DatabaseError: If the insert fails
        """
        query = self.client.table(table).insert(row)
        response = self._execute(query, table, stage)
        rows = response.data or []
        return rows[0] if rows else None

    def update(
        self,
        table: str,
        values: dict[str, Any],
        *,
        uid: str,
        filters: Sequence[Filter] = (),
        stage: str,
    ) -> list[dict[str, Any]]:
        """
        Update the user's rows matching the filters.

        Returns:
            Updated rows (may be empty; zero matches is not an error)

        Raises:
            DatabaseError: If the update fails
        """
        query = self.client.table(table).update(values)
        query = self._scope(query, uid, filters)
        response = self._execute(query, table, stage)
        return response.data or []

    def delete(
        self,
        table: str,
        *,
        uid: str,
        filters: Sequence[Filter] = (),
        stage: str,
    ) -> list[dict[str, Any]]:
        """
        Delete the user's rows matching the filters.

        Returns:
            Deleted rows (may be empty; deleting nothing is not an error)

        Raises:
            DatabaseError: If the delete fails
        """
        query = self.client.table(table).delete()
        query = self._scope(query, uid, filters)
        response = self._execute(query, table, stage)
        return response.data or []

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _scope(query: Any, uid: str, filters: Sequence[Filter]) -> Any:
        """Apply the owner filter, then the caller's filters."""
        if not uid:
            raise ValueError("uid is required for queries on user-owned tables")
        query = eq("uid", uid).apply(query)
        for condition in filters:
            query = condition.apply(query)
        return query

    @staticmethod
    def _execute(query: Any, table: str, stage: str) -> Any:
        try:
            return query.execute()
        except APIError as e:
            logger.error(f"Supabase {stage} failed: {e.message}")
            raise DatabaseError(e.message or "Database request failed", stage=stage, table=table)
