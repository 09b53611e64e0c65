from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_or_none


@dataclass(frozen=True)
class College:
    """Domain entity: a college (tenant)."""

    college_id: str
    name: str
    domain: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.college_id,
            "name": self.name,
            "domain": self.domain,
            "createdAt": iso_or_none(self.created_at),
        }


@dataclass(frozen=True)
class NewCollege:
    name: str
    domain: Optional[str] = None
    college_id: Optional[str] = None
