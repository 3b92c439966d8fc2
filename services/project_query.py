# services/project_query.py
"""
Filter / sort / paginate composition for the project listing.

Parsing is permissive: anything the listing does not understand (unknown
status, unknown sort column, a non-numeric page) is dropped and the request is
served as if the key was absent.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Mapping, Optional

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from api_utils import apply_filter_map, order_clauses, paginate
from enums import ProjectStatus, ProjectPriority
from models import Project
from services import config

SORTABLE_COLUMNS = (
    "id", "name", "status", "priority", "budget",
    "start_date", "end_date", "created_at", "updated_at",
)
DEFAULT_ORDER = ("-created_at", "id")


def _text(v: Any) -> str:
    return str(v).strip() if v is not None else ""


def _positive_int(v: Any) -> Optional[int]:
    try:
        n = int(_text(v))
    except ValueError:
        return None
    return n if n >= 1 else None


@dataclass(frozen=True)
class ProjectFilters:
    search: str = ""
    status: Optional[ProjectStatus] = None
    priority: Optional[ProjectPriority] = None
    sort_by: Optional[str] = None
    sort_direction: str = "desc"
    per_page: int = 10
    page: int = 1

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ProjectFilters":
        sort_by = _text(params.get("sort_by"))
        direction = _text(params.get("sort_direction")).lower()
        per_page = _positive_int(params.get("per_page")) or config.DEFAULT_PER_PAGE
        return cls(
            search=_text(params.get("search")),
            status=ProjectStatus.parse(params.get("status")),
            priority=ProjectPriority.parse(params.get("priority")),
            sort_by=sort_by if sort_by in SORTABLE_COLUMNS else None,
            sort_direction=direction if direction in ("asc", "desc") else "desc",
            per_page=min(per_page, config.MAX_PER_PAGE),
            page=_positive_int(params.get("page")) or 1,
        )

    def ordering(self) -> tuple[str, ...]:
        if not self.sort_by:
            return DEFAULT_ORDER
        prefix = "-" if self.sort_direction == "desc" else ""
        if self.sort_by == "id":
            return (f"{prefix}id",)
        return (f"{prefix}{self.sort_by}", "id")

    def echo(self, page: Optional[int] = None) -> dict[str, Any]:
        """Server-confirmed filter state for the client to rebuild its controls from."""
        return {
            "search": self.search,
            "status": self.status.value if self.status else "",
            "priority": self.priority.value if self.priority else "",
            "sort_by": self.sort_by or "",
            "sort_direction": self.sort_direction,
            "per_page": self.per_page,
            "page": page if page is not None else self.page,
        }


def page_bounds(total: int, per_page: int, page: int) -> dict[str, Any]:
    """
    Pagination metadata for `total` filtered records. The requested page is
    clamped into [1, last_page]; from/to are None when the page is empty.
    """
    last_page = max(1, math.ceil(total / per_page))
    current = min(max(page, 1), last_page)
    offset = (current - 1) * per_page
    shown = max(0, min(per_page, total - offset))
    return {
        "current_page": current,
        "last_page": last_page,
        "per_page": per_page,
        "total": total,
        "from": offset + 1 if shown else None,
        "to": offset + shown if shown else None,
        "offset": offset,
    }


def _search(stmt: Select, term: str) -> Select:
    return stmt.where(or_(
        Project.name.icontains(term, autoescape=True),
        Project.description.icontains(term, autoescape=True),
    ))


FILTER_MAP = {
    "search": _search,
    "status": lambda q, v: q.where(Project.status == v),
    "priority": lambda q, v: q.where(Project.priority == v),
}


def filtered_projects(owner_id, filters: ProjectFilters) -> Select:
    stmt = select(Project).where(Project.user_id == owner_id)
    return apply_filter_map(stmt, asdict(filters), FILTER_MAP)


async def fetch_project_page(
    session: AsyncSession, owner_id, filters: ProjectFilters
) -> tuple[list[Project], dict[str, Any]]:
    stmt = filtered_projects(owner_id, filters)
    order = order_clauses(Project, filters.ordering())
    return await paginate(session, stmt, filters.per_page, filters.page, order, page_bounds)
