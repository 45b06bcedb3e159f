# =============================================================================
# lib/filters.py - Query Filters and Identifier Precedence
# =============================================================================
# A Filter is one step of a PostgREST filter chain (.eq / .is_ / .lt).
#
# first_candidate() picks exactly one identifying filter out of an ordered
# list of (column, value) pairs. Avatars can be addressed by record id,
# vendor group id or storage key; the first non-blank one wins.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Literal

from lib.utils import clean_text

FilterOp = Literal["eq", "is", "lt"]


@dataclass(frozen=True)
class Filter:
    """One column condition in a query chain."""

    column: str
    op: FilterOp
    value: Any

    def apply(self, query: Any) -> Any:
        """Append this condition to a PostgREST query builder."""
        if self.op == "eq":
            return query.eq(self.column, self.value)
        if self.op == "is":
            return query.is_(self.column, self.value)
        if self.op == "lt":
            return query.lt(self.column, self.value)
        raise ValueError(f"Unsupported filter operator: {self.op}")


def eq(column: str, value: Any) -> Filter:
    return Filter(column, "eq", value)


def is_null(column: str) -> Filter:
    return Filter(column, "is", "null")


def lt(column: str, value: Any) -> Filter:
    return Filter(column, "lt", value)


def first_candidate(candidates: Iterable[tuple[str, Any]]) -> Filter | None:
    """
    Return an equality filter for the first candidate with a non-blank value.

    Args:
        candidates: Ordered (column, value) pairs, highest precedence first

    Returns:
        eq(column, stripped_value), or None if every value is blank

    Example:
        first_candidate([("id", None), ("group_id", "g-1"), ("image_key", "k")])
        # -> Filter("group_id", "eq", "g-1")
    """
    for column, value in candidates:
        text = clean_text(value)
        if text is not None:
            return eq(column, text)
    return None
