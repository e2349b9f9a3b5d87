"""Profile Submission Enforcement — validates a submission before it may be stored.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a RejectReason on violation, None on success
    - validate_profile_submission chains all checks in order; first reason wins

Design Decisions:
    - Return reasons (not exceptions): callers decide how to surface them; the route
      raises ProfileValidationError, tests assert on the enum directly
    - Email, occupation and sex only need to be non-empty; occupation is NOT checked
      against the catalogue in core/occupations.py (catalogue is UI guidance)
"""

import re
from datetime import datetime

from profile_service.core.domain_types import RejectReason
from profile_service.core.repository_protocols import ProfileSubmissionLike

REQUIRED_FIELDS: tuple[str, ...] = (
    "first_name", "last_name", "email", "phone",
    "profile_image", "birth_date", "occupation", "sex",
)

# ASCII only: \d would also accept non-Latin digits
_DIGITS_ONLY = re.compile(r"[0-9]+")
_BIRTH_DATE_SHAPE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
_BIRTH_DATE_FORMAT = "%d/%m/%Y"


def check_required_fields(submission: ProfileSubmissionLike) -> RejectReason | None:
    """Rule 1: every field is non-empty. Whitespace counts as content."""
    for name in REQUIRED_FIELDS:
        if not getattr(submission, name, None):
            return RejectReason.MISSING_FIELD
    return None


def check_phone_digits(phone: str) -> RejectReason | None:
    """Rule 2: phone is one or more decimal digits, nothing else."""
    if _DIGITS_ONLY.fullmatch(phone) is None:
        return RejectReason.INVALID_PHONE_FORMAT
    return None


def check_birth_date(birth_date: str) -> RejectReason | None:
    """Rule 3: exact DD/MM/YYYY shape and a real calendar date.

    strptime alone accepts "1/6/1990", so the shape is checked first.
    Year 0000 is valid (proleptic Gregorian, a leap year) but datetime cannot
    represent it, so its day and month are checked against leap year 2000.
    """
    if _BIRTH_DATE_SHAPE.fullmatch(birth_date) is None:
        return RejectReason.INVALID_DATE_FORMAT
    day_month, year = birth_date[:6], birth_date[6:]
    if year == "0000":
        year = "2000"
    try:
        datetime.strptime(day_month + year, _BIRTH_DATE_FORMAT)
    except ValueError:
        return RejectReason.INVALID_DATE_FORMAT
    return None


def validate_profile_submission(
    submission: ProfileSubmissionLike,
) -> RejectReason | None:
    """Run all checks in order. Returns the first reason, or None if accepted."""
    return (
        check_required_fields(submission)
        or check_phone_digits(submission.phone)
        or check_birth_date(submission.birth_date)
    )
