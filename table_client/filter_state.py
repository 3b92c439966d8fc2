"""
Pure helpers that turn the current filter state plus a user interaction into
the parameter set of the next navigation request.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

FilterState = dict[str, Any]

SORT_ASC = "asc"
SORT_DESC = "desc"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def merge_filters(current: Mapping[str, Any], delta: Mapping[str, Any]) -> FilterState:
    """
    Overlay `delta` on `current` and drop empty values, so the server sees an
    absent key rather than an explicit empty string. `page` always resolves:
    the delta's page when it sets one, otherwise 1.
    """
    merged = {**current, **delta, "page": delta.get("page") or 1}
    return {k: v for k, v in merged.items() if not _is_empty(v)}


def next_sort(current: Mapping[str, Any], column: str) -> FilterState:
    """Ascending on a newly selected column; flips asc -> desc on the active one."""
    is_current = current.get("sort_by") == column
    direction = SORT_DESC if is_current and current.get("sort_direction") == SORT_ASC else SORT_ASC
    return {"sort_by": column, "sort_direction": direction}


def sort_indicator(current: Mapping[str, Any], column: str) -> str:
    if current.get("sort_by") != column:
        return "none"
    return SORT_ASC if current.get("sort_direction") == SORT_ASC else SORT_DESC


def has_active_filters(current: Mapping[str, Any], filter_keys: Iterable[str] = ()) -> bool:
    return bool(current.get("search")) or any(current.get(k) for k in filter_keys)
