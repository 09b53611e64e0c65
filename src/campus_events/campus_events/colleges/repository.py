from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import College


class CollegeRepository(Protocol):
    def get_by_id(self, college_id: str) -> Optional[College]:
        raise NotImplementedError

    def list_all(self) -> Sequence[College]:
        raise NotImplementedError

    def create(self, *, name: str, domain: Optional[str] = None, college_id: Optional[str] = None) -> College:
        raise NotImplementedError

    def delete_by_id(self, college_id: str) -> bool:
        """Delete a college; the store cascades to its students, events, registrations and feedback."""

        raise NotImplementedError
