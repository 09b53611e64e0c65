from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import ConflictError, NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(self, *, college_id: Optional[str] = None) -> Sequence[Student]:
        return self._students.list_for_college(college_id)

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def find_by_roll(self, *, student_roll: str, college_id: str) -> Student:
        student = self._students.get_by_roll(student_roll=student_roll, college_id=college_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def get_or_create(
        self,
        *,
        student_roll: str,
        college_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Student:
        """Return the student with this roll in the college, creating it on first sight."""
        student = self._students.get_by_roll(student_roll=student_roll, college_id=college_id)
        if student:
            return student

        try:
            student = self._students.create(student_roll=student_roll, college_id=college_id, name=name, email=email)
        except ConflictError:
            # Created concurrently by another request.
            student = self._students.get_by_roll(student_roll=student_roll, college_id=college_id)
            if not student:
                raise
            return student

        logger.info("Student created: roll=%s college=%s id=%s", student_roll, college_id, student.student_id)
        return student
