from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ApplicantMetadata:
    """Validated applicant identity with age derived at processing time."""

    first_name: str
    last_name: str
    date_of_birth: date
    age: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
