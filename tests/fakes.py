# =============================================================================
# tests/fakes.py - In-Memory Stand-ins for External Services
# =============================================================================
# - InMemoryDatabase: same interface as lib.database.Database, backed by
#   dicts, recording every call
# - RecordingEvents: OperationEvents sink that keeps events in a list
# - VendorStub: httpx MockTransport handler with a configurable answer
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence

import httpx

from app.exceptions import DatabaseError
from lib.filters import Filter


def _comparable(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value
    return value


def matches(row: dict[str, Any], condition: Filter) -> bool:
    """Evaluate one PostgREST-style filter against a stored row."""
    actual = row.get(condition.column)
    if condition.op == "eq":
        return actual == condition.value
    if condition.op == "is":
        return actual is None if condition.value == "null" else actual is condition.value
    if condition.op == "lt":
        return actual is not None and _comparable(actual) < _comparable(condition.value)
    raise ValueError(condition.op)


@dataclass
class DatabaseCall:
    method: str
    table: str
    uid: str | None
    filters: list[Filter] = field(default_factory=list)
    values: dict[str, Any] | None = None
    stage: str | None = None

    @property
    def columns(self) -> list[str]:
        return [f.column for f in self.filters]


class InMemoryDatabase:
    """Dict-backed replacement for lib.database.Database."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None):
        self.tables: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.calls: list[DatabaseCall] = []
        self.failures: dict[tuple[str, str], str] = {}
        self.return_ids = True
        self._next_id = 1

    # -- helpers for tests ----------------------------------------------------

    def fail(self, method: str, table: str, message: str) -> None:
        """Make the next and all later `method` calls on `table` raise DatabaseError."""
        self.failures[(method, table)] = message

    def rows(self, table: str) -> list[dict[str, Any]]:
        return self.tables.setdefault(table, [])

    def calls_to(self, method: str) -> list[DatabaseCall]:
        return [call for call in self.calls if call.method == method]

    # -- Database interface ---------------------------------------------------

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
        self._record("select", table, uid, filters, None, stage)
        found = [dict(row) for row in self._matching(table, uid, filters)]
        if order_by:
            found.sort(key=lambda row: _comparable(row.get(order_by)), reverse=descending)
        if columns != "*":
            keep = [c.strip() for c in columns.split(",")]
            found = [{key: row.get(key) for key in keep} for row in found]
        return found

    def select_one(
        self,
        table: str,
        *,
        uid: str,
        columns: str = "*",
        filters: Sequence[Filter] = (),
        stage: str,
    ) -> dict[str, Any] | None:
        self._record("select_one", table, uid, filters, None, stage)
        found = self._matching(table, uid, filters)
        if not found:
            return None
        row = found[0]
        if columns == "*":
            return dict(row)
        return {key.strip(): row.get(key.strip()) for key in columns.split(",")}

    def insert(self, table: str, row: dict[str, Any], *, stage: str) -> dict[str, Any] | None:
        self._record("insert", table, row.get("uid"), (), row, stage)
        stored = dict(row)
        if self.return_ids:
            stored.setdefault("id", f"{table}-{self._next_id}")
            self._next_id += 1
        self.rows(table).append(stored)
        return dict(stored) if self.return_ids else None

    def update(
        self,
        table: str,
        values: dict[str, Any],
        *,
        uid: str,
        filters: Sequence[Filter] = (),
        stage: str,
    ) -> list[dict[str, Any]]:
        self._record("update", table, uid, filters, values, stage)
        updated = []
        for row in self._matching(table, uid, filters):
            row.update(values)
            updated.append(dict(row))
        return updated

    def delete(
        self,
        table: str,
        *,
        uid: str,
        filters: Sequence[Filter] = (),
        stage: str,
    ) -> list[dict[str, Any]]:
        self._record("delete", table, uid, filters, None, stage)
        doomed = self._matching(table, uid, filters)
        self.tables[table] = [row for row in self.rows(table) if row not in doomed]
        return [dict(row) for row in doomed]

    # -- internals ------------------------------------------------------------

    def _record(self, method, table, uid, filters, values, stage) -> None:
        self.calls.append(DatabaseCall(method, table, uid, list(filters), values, stage))
        message = self.failures.get((method, table))
        if message:
            raise DatabaseError(message, stage=stage, table=table)

    def _matching(self, table: str, uid: str, filters: Sequence[Filter]) -> list[dict[str, Any]]:
        return [
            row for row in self.rows(table)
            if row.get("uid") == uid and all(matches(row, f) for f in filters)
        ]


@dataclass
class Event:
    kind: str
    scope: str
    message: Any
    fields: dict[str, Any]


class RecordingEvents:
    """OperationEvents sink that stores everything it receives."""

    def __init__(self):
        self.events: list[Event] = []

    def start(self, scope: str, message: str, **fields: Any) -> None:
        self.events.append(Event("start", scope, message, fields))

    def success(self, scope: str, message: str, **fields: Any) -> None:
        self.events.append(Event("success", scope, message, fields))

    def failure(self, scope: str, error: Any, **fields: Any) -> None:
        self.events.append(Event("failure", scope, error, fields))

    def kinds(self, scope: str | None = None) -> list[str]:
        return [e.kind for e in self.events if scope is None or e.scope == scope]


class VendorStub:
    """
    Answers every vendor request with a fixed status and body.

    Use with httpx.Client(transport=httpx.MockTransport(stub.handler)).
    """

    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []
        self.raise_error: Exception | None = None

    def respond(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        return httpx.Response(self.status_code, text=self.text)
