"""
Generic listing table that keeps its filter / sort / pagination state in sync
with a server listing endpoint.

The table never owns the filter state: every interaction derives the next
parameter set from the filters the server echoed last, issues a navigation
request, and re-renders from the response.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from table_client.debounce import Debouncer
from table_client.filter_state import (
    FilterState,
    has_active_filters,
    merge_filters,
    next_sort,
    sort_indicator,
)
from table_client.navigator import Navigator

logger = logging.getLogger(__name__)

ALL = "_all"
PER_PAGE_CHOICES = (10, 25, 50, 100)
DEFAULT_PER_PAGE = 10
SEARCH_DEBOUNCE_SECONDS = 0.3
NO_RESULTS_ROW = "Geen resultaten gevonden."

Item = Mapping[str, Any]


@dataclass
class Column:
    key: str
    label: str
    sortable: bool = False
    render: Optional[Callable[[Item], Any]] = None
    class_name: str = ""


@dataclass
class FilterOption:
    value: str
    label: str


@dataclass
class Filter:
    key: str
    label: str
    options: list[FilterOption] = field(default_factory=list)

    @classmethod
    def from_options(cls, key: str, label: str, options: Iterable[Mapping[str, str]]) -> "Filter":
        return cls(key, label, [FilterOption(o["value"], o["label"]) for o in options])


@dataclass
class Row:
    key: Any
    cells: list[Any]
    actions: Any = None
    placeholder: bool = False
    colspan: int = 1


class TableState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    REQUESTING = "requesting"


def empty_pagination() -> dict[str, Any]:
    return {"current_page": 1, "last_page": 1, "per_page": DEFAULT_PER_PAGE, "total": 0, "from": None, "to": None}


class DataTable:
    def __init__(
        self,
        navigator: Navigator,
        base_url: str,
        columns: Sequence[Column],
        *,
        data: Sequence[Item] = (),
        pagination: Optional[Mapping[str, Any]] = None,
        current_filters: Optional[Mapping[str, Any]] = None,
        filters: Sequence[Filter] = (),
        actions: Optional[Callable[[Item], Any]] = None,
        on_row_click: Optional[Callable[[Item], Any]] = None,
        search_placeholder: str = "Zoeken...",
        debounce_delay: float = SEARCH_DEBOUNCE_SECONDS,
    ):
        self.navigator = navigator
        self.base_url = base_url
        self.columns = list(columns)
        self.filters = list(filters)
        self.actions = actions
        self.on_row_click = on_row_click
        self.search_placeholder = search_placeholder

        self.data: list[Item] = list(data)
        self.pagination: dict[str, Any] = dict(pagination or empty_pagination())
        self.current_filters: FilterState = dict(current_filters or {})
        self.search_value: str = self.current_filters.get("search") or ""

        self._debouncer = Debouncer(self._on_search_settled, debounce_delay)
        self._in_flight = 0
        self._tasks: set[asyncio.Task] = set()

    # ------------- state -------------
    @property
    def state(self) -> TableState:
        if self._in_flight:
            return TableState.REQUESTING
        if self._debouncer.pending:
            return TableState.SEARCHING
        return TableState.IDLE

    def apply(self, payload: Mapping[str, Any]) -> None:
        """Re-derive rows, pagination and filters from a listing response."""
        self.data = list(payload.get("data", []))
        self.pagination = dict(payload.get("pagination") or empty_pagination())
        self.current_filters = dict(payload.get("filters") or {})
        # keep what the user is still typing
        if not self._debouncer.pending:
            self.search_value = self.current_filters.get("search") or ""

    # ------------- navigation -------------
    async def _request(self, params: FilterState) -> FilterState:
        logger.debug("navigate %s params=%s", self.base_url, params)
        self._in_flight += 1
        try:
            payload = await self.navigator.get(self.base_url, params)
        finally:
            self._in_flight -= 1
        self.apply(payload)
        return params

    async def navigate(self, delta: Mapping[str, Any]) -> FilterState:
        return await self._request(merge_filters(self.current_filters, delta))

    def _on_search_settled(self, value: str) -> None:
        task = asyncio.ensure_future(self.navigate({"search": value or None, "page": 1}))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(self._log_search_failure)

    def _log_search_failure(self, task: asyncio.Task) -> None:
        if task.cancelled() or task.exception() is None:
            return
        logger.error("search navigation to %s failed: %r", self.base_url, task.exception())

    async def wait_settled(self) -> None:
        """Wait for navigation requests started by the search debounce."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ------------- interactions -------------
    def handle_search(self, value: str) -> None:
        self.search_value = value
        self._debouncer.trigger(value)

    async def handle_sort(self, column: str) -> Optional[FilterState]:
        if not any(c.key == column and c.sortable for c in self.columns):
            return None
        return await self.navigate(next_sort(self.current_filters, column))

    async def handle_filter_change(self, key: str, value: str) -> FilterState:
        if value == ALL:
            value = ""
        return await self.navigate({key: value or None, "page": 1})

    async def handle_per_page_change(self, value: str | int) -> FilterState:
        return await self.navigate({"per_page": int(value), "page": 1})

    async def handle_page_change(self, page: int) -> FilterState:
        return await self.navigate({"page": page})

    async def clear_filters(self) -> FilterState:
        self._debouncer.cancel()
        self.search_value = ""
        return await self._request({})

    def click_row(self, item: Item) -> Any:
        if self.on_row_click:
            return self.on_row_click(item)
        return None

    # ------------- rendering -------------
    @property
    def show_clear(self) -> bool:
        return has_active_filters(self.current_filters, [f.key for f in self.filters])

    @property
    def per_page_value(self) -> str:
        return str(self.current_filters.get("per_page") or DEFAULT_PER_PAGE)

    def filter_controls(self) -> list[dict[str, Any]]:
        controls = []
        for f in self.filters:
            options = [{"value": ALL, "label": f"Alle {f.label.lower()}"}]
            options += [{"value": o.value, "label": o.label} for o in f.options]
            controls.append({
                "key": f.key,
                "label": f.label,
                "value": str(self.current_filters.get(f.key) or ALL),
                "options": options,
            })
        return controls

    def header(self) -> list[dict[str, Any]]:
        cells = [
            {
                "key": c.key,
                "label": c.label,
                "sortable": c.sortable,
                "sort": sort_indicator(self.current_filters, c.key) if c.sortable else None,
                "class_name": c.class_name,
            }
            for c in self.columns
        ]
        if self.actions:
            cells.append({"key": "_actions", "label": "Acties", "sortable": False, "sort": None, "class_name": ""})
        return cells

    def rows(self) -> list[Row]:
        if not self.data:
            width = len(self.columns) + (1 if self.actions else 0)
            return [Row(key=None, cells=[NO_RESULTS_ROW], placeholder=True, colspan=width)]
        return [
            Row(
                key=item.get("id"),
                cells=[c.render(item) if c.render else item.get(c.key) for c in self.columns],
                actions=self.actions(item) if self.actions else None,
            )
            for item in self.data
        ]

    def summary(self) -> str:
        p = self.pagination
        if p.get("from") and p.get("to"):
            return f"{p['from']} tot {p['to']} van {p['total']} resultaten"
        return "Geen resultaten"

    def controls(self) -> dict[str, Any]:
        current, last = self.pagination["current_page"], self.pagination["last_page"]
        return {
            "label": f"Pagina {current} van {last}",
            "first": {"page": 1, "disabled": current == 1},
            "previous": {"page": current - 1, "disabled": current == 1},
            "next": {"page": current + 1, "disabled": current == last},
            "last": {"page": last, "disabled": current == last},
        }
