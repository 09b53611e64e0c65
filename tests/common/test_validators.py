from __future__ import annotations

from datetime import datetime

import pytest

from src.campus_events.campus_events.common.validators import (
    validate_attendance_update,
    validate_feedback,
    validate_new_college,
    validate_new_event,
    validate_registration,
)
from src.campus_events.campus_events.core.enums import AttendanceStatus, EventState
from src.campus_events.campus_events.core.exceptions import ValidationError


def test_non_object_body_is_rejected():
    for validate in (validate_new_college, validate_new_event, validate_registration, validate_feedback):
        result = validate(None)
        assert not result.ok
        assert result.message == "Request body must be a JSON object"


def test_registration_reports_every_missing_field():
    result = validate_registration({"studentRoll": "  "})

    assert not result.ok
    assert result.errors == ("eventId is required", "studentRoll is required", "collegeId is required")


def test_registration_normalises_email_and_trims_text():
    result = validate_registration(
        {"eventId": " E001 ", "studentRoll": "R050", "collegeId": "C001", "email": "Asha@Example.COM"}
    )

    assert result.ok
    assert result.value.event_id == "E001"
    assert result.value.email == "asha@example.com"


def test_registration_rejects_bad_email():
    result = validate_registration({"eventId": "E001", "studentRoll": "R050", "collegeId": "C001", "email": "nope"})

    assert result.errors == ("email is not a valid address",)


@pytest.mark.parametrize("rating", [0, 6, "9", 3.5, True, "x", "--3", "²", "4\n5"])
def test_feedback_rejects_out_of_range_or_non_integer_ratings(rating):
    result = validate_feedback({"eventId": "E001", "studentRoll": "R001", "collegeId": "C001", "rating": rating})

    assert not result.ok


def test_feedback_accepts_integer_string():
    result = validate_feedback({"eventId": "E001", "studentRoll": "R001", "collegeId": "C001", "rating": "4"})

    assert result.ok
    assert result.value.rating == 4


def test_feedback_requires_rating():
    result = validate_feedback({"eventId": "E001", "studentRoll": "R001", "collegeId": "C001"})

    assert result.errors == ("rating is required",)


def test_unwrap_raises_validation_error_with_joined_message():
    with pytest.raises(ValidationError, match="eventId is required; studentRoll is required"):
        validate_attendance_update({"collegeId": "C001", "status": "present"}).unwrap()


def test_attendance_status_must_be_known():
    bad = validate_attendance_update({"eventId": "E001", "studentRoll": "R001", "collegeId": "C001", "status": "gone"})
    good = validate_attendance_update(
        {"eventId": "E001", "studentRoll": "R001", "collegeId": "C001", "status": "PRESENT"}
    )

    assert not bad.ok
    assert good.value.status == AttendanceStatus.PRESENT


def test_event_defaults_to_draft_and_parses_times():
    result = validate_new_event(
        {"collegeId": "C001", "title": "Hackathon", "startTime": "2025-10-01T09:00:00Z", "endTime": "2025-10-01T18:00:00Z"}
    )

    assert result.ok
    assert result.value.state == EventState.DRAFT
    assert result.value.start_time == datetime(2025, 10, 1, 9, 0, 0)


def test_event_rejects_bad_state_and_reversed_times():
    result = validate_new_event(
        {
            "collegeId": "C001",
            "title": "Hackathon",
            "state": "archived",
            "startTime": "2025-10-02T09:00:00",
            "endTime": "2025-10-01T09:00:00",
        }
    )

    assert len(result.errors) == 2
    assert "endTime must not be before startTime" in result.errors


def test_college_requires_name():
    assert validate_new_college({"domain": "x.edu"}).errors == ("name is required",)
