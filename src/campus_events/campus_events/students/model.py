from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_or_none


@dataclass(frozen=True)
class Student:
    """Domain entity: a student, unique within a college by roll number."""

    student_id: str
    student_roll: str
    college_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "studentRoll": self.student_roll,
            "name": self.name,
            "email": self.email,
            "collegeId": self.college_id,
            "createdAt": iso_or_none(self.created_at),
        }
