"""Record validation for write requests.

Validators never raise: they return a ``ValidationResult`` carrying either the
parsed command or the list of problems found. Callers decide what to do with it
(``unwrap()`` raises ``ValidationError``).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar

from ..colleges.model import NewCollege
from ..core.constants import RATING_MAX, RATING_MIN
from ..core.enums import AttendanceStatus, EventState
from ..core.exceptions import ValidationError
from ..events.model import NewEvent
from ..feedback.model import NewFeedback
from ..registrations.model import AttendanceUpdate, NewRegistration
from .datetime_utils import parse_iso_datetime

T = TypeVar("T")

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_INTEGER_RE = re.compile(r"-?\d+", re.ASCII)


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "; ".join(self.errors)

    def unwrap(self) -> T:
        if self.errors:
            raise ValidationError(self.message)
        return self.value


def invalid(*errors: str) -> ValidationResult:
    return ValidationResult(errors=tuple(errors))


def text_field(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def missing_fields(payload: Mapping[str, Any], keys: tuple[str, ...]) -> list[str]:
    return [f"{key} is required" for key in keys if text_field(payload, key) is None]


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def parse_rating(value: Any) -> Optional[int]:
    """Accept ints and integer strings; reject bools, floats with a fraction and junk."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        return int(value.strip())
    return None


def _require_object(payload: Any) -> Optional[ValidationResult]:
    if not isinstance(payload, Mapping):
        return invalid("Request body must be a JSON object")
    return None


def validate_new_college(payload: Any) -> ValidationResult[NewCollege]:
    bad = _require_object(payload)
    if bad:
        return bad

    errors = missing_fields(payload, ("name",))
    if errors:
        return invalid(*errors)

    return ValidationResult(
        value=NewCollege(
            name=text_field(payload, "name"),
            domain=text_field(payload, "domain"),
            college_id=text_field(payload, "id"),
        )
    )


def validate_new_event(payload: Any) -> ValidationResult[NewEvent]:
    bad = _require_object(payload)
    if bad:
        return bad

    errors = missing_fields(payload, ("collegeId", "title"))

    state = EventState.DRAFT
    raw_state = text_field(payload, "state")
    if raw_state is not None:
        try:
            state = EventState(raw_state.lower())
        except ValueError:
            allowed = ", ".join(s.value for s in EventState)
            errors.append(f"state must be one of: {allowed}")

    times = {}
    for key in ("startTime", "endTime"):
        raw = text_field(payload, key)
        times[key] = None
        if raw is None:
            continue
        try:
            times[key] = parse_iso_datetime(raw)
        except ValueError:
            errors.append(f"{key} must be an ISO 8601 datetime")

    if times["startTime"] and times["endTime"] and times["endTime"] < times["startTime"]:
        errors.append("endTime must not be before startTime")

    if errors:
        return invalid(*errors)

    return ValidationResult(
        value=NewEvent(
            college_id=text_field(payload, "collegeId"),
            title=text_field(payload, "title"),
            state=state,
            description=text_field(payload, "description"),
            event_type=text_field(payload, "type"),
            start_time=times["startTime"],
            end_time=times["endTime"],
            location=text_field(payload, "location"),
            event_code=text_field(payload, "eventCode"),
            event_id=text_field(payload, "id"),
        )
    )


def validate_registration(payload: Any) -> ValidationResult[NewRegistration]:
    bad = _require_object(payload)
    if bad:
        return bad

    errors = missing_fields(payload, ("eventId", "studentRoll", "collegeId"))
    email = text_field(payload, "email")
    if email is not None and not is_valid_email(email):
        errors.append("email is not a valid address")

    if errors:
        return invalid(*errors)

    return ValidationResult(
        value=NewRegistration(
            event_id=text_field(payload, "eventId"),
            student_roll=text_field(payload, "studentRoll"),
            college_id=text_field(payload, "collegeId"),
            name=text_field(payload, "name"),
            email=email.lower() if email else None,
        )
    )


def validate_attendance_update(payload: Any) -> ValidationResult[AttendanceUpdate]:
    bad = _require_object(payload)
    if bad:
        return bad

    errors = missing_fields(payload, ("eventId", "studentRoll", "collegeId", "status"))
    if errors:
        return invalid(*errors)

    try:
        status = AttendanceStatus(text_field(payload, "status").lower())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        return invalid(f"status must be one of: {allowed}")

    return ValidationResult(
        value=AttendanceUpdate(
            event_id=text_field(payload, "eventId"),
            student_roll=text_field(payload, "studentRoll"),
            college_id=text_field(payload, "collegeId"),
            status=status,
        )
    )


def validate_feedback(payload: Any) -> ValidationResult[NewFeedback]:
    bad = _require_object(payload)
    if bad:
        return bad

    errors = missing_fields(payload, ("eventId", "studentRoll", "collegeId"))

    rating = None
    if payload.get("rating") is None:
        errors.append("rating is required")
    else:
        rating = parse_rating(payload.get("rating"))
        if rating is None:
            errors.append("rating must be an integer")
        elif not RATING_MIN <= rating <= RATING_MAX:
            errors.append(f"rating must be between {RATING_MIN} and {RATING_MAX}")

    if errors:
        return invalid(*errors)

    return ValidationResult(
        value=NewFeedback(
            event_id=text_field(payload, "eventId"),
            student_roll=text_field(payload, "studentRoll"),
            college_id=text_field(payload, "collegeId"),
            rating=rating,
            comments=text_field(payload, "comments"),
        )
    )
