# api_utils.py
import json
from typing import Any, Callable, Sequence
from fastapi.responses import JSONResponse
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

# ---------- Sort helpers ----------
def order_clauses(model: Any, order: Sequence[str]) -> list[Any]:
    """["-name", "id"] -> [model.name.desc(), model.id.asc()]"""
    clauses = []
    for key in order:
        desc = key.startswith("-")
        column = getattr(model, key.lstrip("-"))
        clauses.append(column.desc() if desc else column.asc())
    return clauses

# ---------- Query helpers ----------
def apply_filter_map(stmt: Select, filters: dict, fmap: dict[str, Callable[[Select, Any], Select]]) -> Select:
    # empty strings count as "not set" so a cleared input never narrows the result
    for key, fn in fmap.items():
        if key in filters and filters[key] is not None and filters[key] != "":
            stmt = fn(stmt, filters[key])
    return stmt

async def paginate(
    session: AsyncSession,
    stmt: Select,
    per_page: int,
    page: int,
    order: Sequence[Any],
    bounds: Callable[[int, int, int], dict[str, Any]],
) -> tuple[list[Any], dict[str, Any]]:
    total = await session.scalar(select(func.count()).select_from(stmt.order_by(None).subquery()))
    meta = bounds(total or 0, per_page, page)
    offset = meta.pop("offset")
    items = (await session.scalars(stmt.order_by(*order).offset(offset).limit(per_page))).all()
    return list(items), meta

def respond_item(model_obj: Any, to_pydantic: Callable[[Any], Any], status_code: int = 200) -> JSONResponse:
    """Single item response that uses the same Pydantic-safe encoding."""
    payload = json.loads(to_pydantic(model_obj).model_dump_json(by_alias=True))
    return JSONResponse(status_code=status_code, content=payload)
