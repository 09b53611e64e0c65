from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import College, NewCollege
from .repository import CollegeRepository

logger = logging.getLogger(__name__)


class CollegeService:
    """Use case: manage colleges (tenants)."""

    def __init__(self, colleges: CollegeRepository):
        self._colleges = colleges

    def create_college(self, data: NewCollege) -> College:
        college = self._colleges.create(name=data.name, domain=data.domain, college_id=data.college_id)
        logger.info("College created: %s (%s)", college.college_id, college.name)
        return college

    def list_colleges(self) -> Sequence[College]:
        return self._colleges.list_all()

    def get_college(self, college_id: str) -> College:
        college = self._colleges.get_by_id(college_id)
        if not college:
            raise NotFoundError("College not found")
        return college

    def delete_college(self, college_id: str) -> None:
        self.get_college(college_id)
        if not self._colleges.delete_by_id(college_id):
            raise NotFoundError("College not found")
        logger.info("College deleted with its students, events, registrations and feedback: %s", college_id)
