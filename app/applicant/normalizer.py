"""Validates raw applicant form fields and derives age."""

from collections.abc import Mapping
from datetime import date, datetime

from app.applicant.clock import BaseClock, SystemClock
from app.applicant.models import ApplicantMetadata
from app.logging.logger import Log
from app.processor.exceptions import MetadataValidationError

FIRST_NAME_FIELD = "first-name"
LAST_NAME_FIELD = "last-name"
DOB_FIELD = "dob"
DOB_FORMAT = "%Y-%m-%d"


def compute_age(date_of_birth: date, today: date) -> int:
    """Completed birthdays between ``date_of_birth`` and ``today``."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class MetadataNormalizer:
    """Turns raw form fields into ApplicantMetadata.

    All field errors are collected and raised together.
    """

    def __init__(self, clock: BaseClock | None = None) -> None:
        self._clock = clock if clock is not None else SystemClock()

    def normalize(self, raw_fields: Mapping[str, str | None]) -> ApplicantMetadata:
        errors: dict[str, str] = {}

        first_name = (raw_fields.get(FIRST_NAME_FIELD) or "").strip()
        if not first_name:
            errors[FIRST_NAME_FIELD] = "required"

        last_name = (raw_fields.get(LAST_NAME_FIELD) or "").strip()
        if not last_name:
            errors[LAST_NAME_FIELD] = "required"

        today = self._clock.today()
        date_of_birth = self._parse_dob(raw_fields.get(DOB_FIELD), today, errors)

        if errors or date_of_birth is None:
            Log.info(f"Applicant metadata rejected: {errors}")
            raise MetadataValidationError(errors)

        return ApplicantMetadata(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            age=compute_age(date_of_birth, today),
        )

    @staticmethod
    def _parse_dob(raw: str | None, today: date, errors: dict[str, str]) -> date | None:
        cleaned = (raw or "").strip()
        if not cleaned:
            errors[DOB_FIELD] = "required"
            return None
        try:
            parsed = datetime.strptime(cleaned, DOB_FORMAT).date()
        except ValueError:
            parsed = None
        if parsed is None or parsed.isoformat() != cleaned:
            errors[DOB_FIELD] = "invalid-date"
            return None
        if parsed > today:
            errors[DOB_FIELD] = "in-future"
            return None
        return parsed
