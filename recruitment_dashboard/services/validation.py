"""
Validation Rule Engine

Field-level rules live on the RecruitmentCreate schema. The college ID rule
depends on year_of_study, so it is checked here, after the schema passes and
before anything reaches MongoDB:

- 1st year  -> admission number, e.g. 19ABCD1234
- 2nd-4th   -> USN, e.g. 1DS21CS123

Uniqueness is NOT checked here; the unique indexes reject duplicates on insert.
"""

import re

import pydantic

from recruitment_dashboard.core.errors import ValidationError
from recruitment_dashboard.schemas.schemas import RecruitmentCreate, YearOfStudy

ADMISSION_NUMBER_RE = re.compile(r"^[1-9][0-9][A-Z]{4}[0-9]{4}$")
USN_RE = re.compile(r"^1DS[1-3][0-9][A-Z]{2}[0-9]{3}$")


def validate_college_id(year_of_study: str, college_id: str) -> None:
    """Raise ValidationError if college_id doesn't fit the format for the year."""
    if year_of_study == YearOfStudy.first.value:
        if not ADMISSION_NUMBER_RE.match(college_id or ""):
            raise ValidationError(
                "college_id",
                "Invalid Admission Number format for 1st year. Expected format: 19ABCD1234",
            )
    elif not USN_RE.match(college_id or ""):
        raise ValidationError(
            "college_id",
            "Invalid USN format for 2nd/3rd/4th year. Expected format: 1DS21CS123",
        )


def _first_error(exc: pydantic.ValidationError) -> ValidationError:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ())) or "body"
    return ValidationError(field, f"Invalid {field}: {error.get('msg', 'invalid value')}")


def validate_application(payload: dict) -> RecruitmentCreate:
    """
    Validate and normalize a submitted application.

    Returns the normalized RecruitmentCreate (trimmed, lower-cased email,
    upper-cased college ID). Raises ValidationError naming the first
    offending field.
    """
    if not isinstance(payload, dict):
        raise ValidationError("body", "Request body must be a JSON object")

    try:
        application = RecruitmentCreate.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise _first_error(exc) from exc

    validate_college_id(application.year_of_study.value, application.college_id)
    return application
