from __future__ import annotations

from typing import Iterable, Mapping, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_many(self, student_ids: Iterable[str]) -> Mapping[str, Student]:
        """Batch lookup used for report enrichment; unknown ids are simply absent."""

        raise NotImplementedError

    def get_by_roll(self, *, student_roll: str, college_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_for_college(self, college_id: Optional[str] = None) -> Sequence[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        student_roll: str,
        college_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> Student:
        """Insert a student; raises ConflictError when (student_roll, college_id) exists."""

        raise NotImplementedError
