from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .colleges.mysql_college_repository import MySQLCollegeRepository
from .colleges.repository import CollegeRepository
from .colleges.service import CollegeService
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLEventRepository
from .events.repository import EventRepository
from .events.service import EventService
from .feedback.mysql_feedback_repository import MySQLFeedbackRepository
from .feedback.repository import FeedbackRepository
from .feedback.service import FeedbackService
from .registrations.mysql_registration_repository import MySQLRegistrationRepository
from .registrations.repository import RegistrationRepository
from .registrations.service import RegistrationService
from .reports.service import ReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    colleges_repo: CollegeRepository
    students_repo: StudentRepository
    events_repo: EventRepository
    registrations_repo: RegistrationRepository
    feedback_repo: FeedbackRepository

    college_service: CollegeService
    student_service: StudentService
    event_service: EventService
    registration_service: RegistrationService
    feedback_service: FeedbackService
    report_service: ReportService


def assemble_container(
    *,
    conn: Optional[DatabaseConnection],
    colleges_repo: CollegeRepository,
    students_repo: StudentRepository,
    events_repo: EventRepository,
    registrations_repo: RegistrationRepository,
    feedback_repo: FeedbackRepository,
) -> Container:
    """Wire services on top of any repository implementation (MySQL or in-memory)."""
    college_service = CollegeService(colleges_repo)
    student_service = StudentService(students_repo)
    event_service = EventService(events_repo, colleges_repo)
    registration_service = RegistrationService(registrations_repo, events_repo, student_service)
    feedback_service = FeedbackService(feedback_repo, events_repo, student_service)
    report_service = ReportService(registrations_repo, feedback_repo, events_repo, students_repo)

    return Container(
        conn=conn,
        colleges_repo=colleges_repo,
        students_repo=students_repo,
        events_repo=events_repo,
        registrations_repo=registrations_repo,
        feedback_repo=feedback_repo,
        college_service=college_service,
        student_service=student_service,
        event_service=event_service,
        registration_service=registration_service,
        feedback_service=feedback_service,
        report_service=report_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).open()

    return assemble_container(
        conn=conn,
        colleges_repo=MySQLCollegeRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        events_repo=MySQLEventRepository(conn),
        registrations_repo=MySQLRegistrationRepository(conn),
        feedback_repo=MySQLFeedbackRepository(conn),
    )
