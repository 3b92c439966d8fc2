"""Closed value sets shared by the models, schemas, query layer and option lists."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class _LabeledEnum(str, Enum):
    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> Optional["_LabeledEnum"]:
        """Return the member for `value`, or None when it is empty or unknown."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip())
        except ValueError:
            return None

    @classmethod
    def options(cls) -> list[dict[str, str]]:
        return [{"value": m.value, "label": m.label} for m in cls]


class ProjectStatus(_LabeledEnum):
    CONCEPT = "concept"
    ACTIEF = "actief"
    VOLTOOID = "voltooid"
    GEANNULEERD = "geannuleerd"


class ProjectPriority(_LabeledEnum):
    LAAG = "laag"
    NORMAAL = "normaal"
    HOOG = "hoog"
    URGENT = "urgent"
