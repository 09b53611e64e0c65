from __future__ import annotations

import itertools
from collections import Counter, defaultdict
from dataclasses import replace
from datetime import datetime

import pytest

from src.campus_events.campus_events.colleges.model import College
from src.campus_events.campus_events.container import assemble_container
from src.campus_events.campus_events.core.enums import AttendanceStatus, EventState
from src.campus_events.campus_events.core.exceptions import ConflictError
from src.campus_events.campus_events.events.model import Event, NewEvent
from src.campus_events.campus_events.feedback.model import EventRatingStats, Feedback
from src.campus_events.campus_events.main import create_app
from src.campus_events.campus_events.registrations.model import (
    EventAttendanceStats,
    EventRegistrationCount,
    Registration,
    StudentParticipationStats,
)
from src.campus_events.campus_events.students.model import Student

NOW = datetime(2025, 9, 1, 10, 0, 0)


class Tables:
    """Shared rows for the in-memory repositories (cascades need to see every table)."""

    def __init__(self):
        self.colleges: dict[str, College] = {}
        self.students: dict[str, Student] = {}
        self.events: dict[str, Event] = {}
        self.registrations: dict[str, Registration] = {}
        self.feedback: dict[str, Feedback] = {}
        self._ids = itertools.count(1)

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids):04d}"

    def drop_where(self, table: str, **match) -> None:
        rows = getattr(self, table)
        for key in [k for k, row in rows.items() if all(getattr(row, f) == v for f, v in match.items())]:
            del rows[key]


class InMemoryColleges:
    def __init__(self, tables: Tables):
        self.t = tables

    def get_by_id(self, college_id):
        return self.t.colleges.get(college_id)

    def list_all(self):
        return sorted(self.t.colleges.values(), key=lambda c: (c.name, c.college_id))

    def create(self, *, name, domain=None, college_id=None):
        college_id = college_id or self.t.next_id("col")
        if college_id in self.t.colleges:
            raise ConflictError("Duplicate record")
        self.t.colleges[college_id] = College(college_id=college_id, name=name, domain=domain, created_at=NOW)
        return self.t.colleges[college_id]

    def delete_by_id(self, college_id):
        if college_id not in self.t.colleges:
            return False
        del self.t.colleges[college_id]
        for table in ("students", "events", "registrations", "feedback"):
            self.t.drop_where(table, college_id=college_id)
        return True


class InMemoryStudents:
    def __init__(self, tables: Tables):
        self.t = tables
        self.get_many_calls = 0

    def get_by_id(self, student_id):
        return self.t.students.get(student_id)

    def get_many(self, student_ids):
        self.get_many_calls += 1
        return {sid: self.t.students[sid] for sid in set(student_ids) if sid in self.t.students}

    def get_by_roll(self, *, student_roll, college_id):
        for s in self.t.students.values():
            if s.student_roll == student_roll and s.college_id == college_id:
                return s
        return None

    def list_for_college(self, college_id=None):
        rows = [s for s in self.t.students.values() if college_id is None or s.college_id == college_id]
        return sorted(rows, key=lambda s: (s.college_id, s.student_roll))

    def create(self, *, student_roll, college_id, name=None, email=None, student_id=None):
        if self.get_by_roll(student_roll=student_roll, college_id=college_id):
            raise ConflictError("Duplicate record")
        student_id = student_id or self.t.next_id("stu")
        self.t.students[student_id] = Student(
            student_id=student_id,
            student_roll=student_roll,
            college_id=college_id,
            name=name,
            email=email,
            created_at=NOW,
        )
        return self.t.students[student_id]


class InMemoryEvents:
    def __init__(self, tables: Tables):
        self.t = tables

    def get_by_id(self, event_id):
        return self.t.events.get(event_id)

    def get_many(self, event_ids):
        return {eid: self.t.events[eid] for eid in set(event_ids) if eid in self.t.events}

    def list_events(self, *, college_id=None, state=None, event_type=None):
        rows = [
            e
            for e in self.t.events.values()
            if (college_id is None or e.college_id == college_id)
            and (state is None or e.state == state)
            and (event_type is None or e.event_type == event_type)
        ]
        return sorted(rows, key=lambda e: (e.start_time or datetime.min, e.event_id))

    def create(self, data: NewEvent):
        event_id = data.event_id or self.t.next_id("evt")
        if event_id in self.t.events:
            raise ConflictError("Duplicate record")
        self.t.events[event_id] = Event(
            event_id=event_id,
            college_id=data.college_id,
            title=data.title,
            state=data.state,
            description=data.description,
            event_type=data.event_type,
            start_time=data.start_time,
            end_time=data.end_time,
            location=data.location,
            event_code=data.event_code,
            created_at=NOW,
            updated_at=NOW,
        )
        return self.t.events[event_id]

    def set_state(self, event_id, state: EventState):
        if event_id not in self.t.events:
            return False
        self.t.events[event_id] = replace(self.t.events[event_id], state=state)
        return True

    def delete_by_id(self, event_id):
        if event_id not in self.t.events:
            return False
        del self.t.events[event_id]
        self.t.drop_where("registrations", event_id=event_id)
        self.t.drop_where("feedback", event_id=event_id)
        return True


class InMemoryRegistrations:
    def __init__(self, tables: Tables):
        self.t = tables

    def get_by_id(self, registration_id):
        return self.t.registrations.get(registration_id)

    def get_for_event_and_student(self, *, event_id, student_id):
        for r in self.t.registrations.values():
            if r.event_id == event_id and r.student_id == student_id:
                return r
        return None

    def list_for_event(self, event_id):
        return [r for r in self.t.registrations.values() if r.event_id == event_id]

    def create(self, *, event_id, student_id, college_id, attendance_status=AttendanceStatus.REGISTERED):
        if self.get_for_event_and_student(event_id=event_id, student_id=student_id):
            raise ConflictError("Duplicate record")
        registration_id = self.t.next_id("reg")
        self.t.registrations[registration_id] = Registration(
            registration_id=registration_id,
            event_id=event_id,
            student_id=student_id,
            college_id=college_id,
            registered_at=NOW,
            attendance_status=attendance_status,
        )
        return self.t.registrations[registration_id]

    def set_attendance(self, registration_id, status):
        if registration_id not in self.t.registrations:
            return False
        self.t.registrations[registration_id] = replace(self.t.registrations[registration_id], attendance_status=status)
        return True

    def _scoped(self, college_id=None, event_id=None):
        return [
            r
            for r in self.t.registrations.values()
            if (college_id is None or r.college_id == college_id) and (event_id is None or r.event_id == event_id)
        ]

    def count_by_event(self, *, college_id=None):
        counts = Counter(r.event_id for r in self._scoped(college_id))
        return [EventRegistrationCount(event_id=e, registrations=n) for e, n in counts.items()]

    def attendance_by_event(self, *, college_id=None, event_id=None):
        totals, present = Counter(), Counter()
        for r in self._scoped(college_id, event_id):
            totals[r.event_id] += 1
            present[r.event_id] += r.attendance_status == AttendanceStatus.PRESENT
        return [
            EventAttendanceStats(event_id=e, total_registered=n, present_count=present[e]) for e, n in totals.items()
        ]

    def participation_by_student(self, *, college_id=None):
        totals, present = Counter(), Counter()
        for r in self._scoped(college_id):
            totals[r.student_id] += 1
            present[r.student_id] += r.attendance_status == AttendanceStatus.PRESENT
        return [
            StudentParticipationStats(student_id=s, events_registered=n, events_attended=present[s])
            for s, n in totals.items()
        ]


class InMemoryFeedback:
    def __init__(self, tables: Tables):
        self.t = tables

    def get_by_id(self, feedback_id):
        return self.t.feedback.get(feedback_id)

    def list_for_event(self, event_id):
        return [f for f in self.t.feedback.values() if f.event_id == event_id]

    def create(self, *, event_id, student_id, college_id, rating, comments=None):
        feedback_id = self.t.next_id("fb")
        self.t.feedback[feedback_id] = Feedback(
            feedback_id=feedback_id,
            event_id=event_id,
            student_id=student_id,
            college_id=college_id,
            rating=int(rating),
            comments=comments,
            created_at=NOW,
        )
        return self.t.feedback[feedback_id]

    def rating_totals_by_event(self, *, college_id=None):
        sums, counts = defaultdict(int), Counter()
        for f in self.t.feedback.values():
            if college_id is None or f.college_id == college_id:
                sums[f.event_id] += f.rating
                counts[f.event_id] += 1
        return [EventRatingStats(event_id=e, rating_sum=sums[e], feedback_count=n) for e, n in counts.items()]


@pytest.fixture
def tables() -> Tables:
    return Tables()


@pytest.fixture
def container(tables):
    return assemble_container(
        conn=None,
        colleges_repo=InMemoryColleges(tables),
        students_repo=InMemoryStudents(tables),
        events_repo=InMemoryEvents(tables),
        registrations_repo=InMemoryRegistrations(tables),
        feedback_repo=InMemoryFeedback(tables),
    )


@pytest.fixture
def demo(container):
    """One college, a published workshop (14 regs, cycle of statuses) and a published fest (10 regs)."""
    college = container.colleges_repo.create(name="Reva University", domain="reva.edu", college_id="C001")
    workshop = container.events_repo.create(
        NewEvent(college_id="C001", title="AI Workshop", event_type="workshop", state=EventState.PUBLISHED, event_id="E001")
    )
    fest = container.events_repo.create(
        NewEvent(college_id="C001", title="Tech Fest", event_type="fest", state=EventState.PUBLISHED, event_id="E002")
    )
    students = [
        container.students_repo.create(
            student_roll=f"R{i:03d}", college_id="C001", name=f"Student {i}", student_id=f"S{i:03d}"
        )
        for i in range(1, 21)
    ]

    cycle = [
        AttendanceStatus.PRESENT,
        AttendanceStatus.PRESENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.REGISTERED,
        AttendanceStatus.LATE,
    ]
    for i in range(14):
        container.registrations_repo.create(
            event_id="E001", student_id=students[i].student_id, college_id="C001", attendance_status=cycle[i % 5]
        )
    fest_cycle = [AttendanceStatus.PRESENT, AttendanceStatus.REGISTERED, AttendanceStatus.LATE]
    for i in range(10):
        container.registrations_repo.create(
            event_id="E002", student_id=students[i].student_id, college_id="C001", attendance_status=fest_cycle[i % 3]
        )

    for event_id, idx, rating in (("E001", 0, 5), ("E001", 1, 4), ("E002", 4, 3), ("E002", 9, 4)):
        container.feedback_repo.create(
            event_id=event_id, student_id=students[idx].student_id, college_id="C001", rating=rating
        )

    return {"college": college, "workshop": workshop, "fest": fest, "students": students}


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
