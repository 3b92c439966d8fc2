from typing import Any
from fastapi import Query

class ListParams:
    """
    Raw listing query parameters. Everything arrives as an optional string so a
    malformed value degrades to "no constraint" instead of a 422.
    """
    def __init__(
        self,
        search: str | None = Query(None),
        status: str | None = Query(None),
        priority: str | None = Query(None),
        sort_by: str | None = Query(None),
        sort_direction: str | None = Query(None),
        per_page: str | None = Query(None),
        page: str | None = Query(None),
    ):
        self.search         = search
        self.status         = status
        self.priority       = priority
        self.sort_by        = sort_by
        self.sort_direction = sort_direction
        self.per_page       = per_page
        self.page           = page

    def as_dict(self) -> dict[str, Any]:
        return {k: v for k, v in vars(self).items() if v is not None}
