from dataclasses import dataclass, field
from enum import Enum

from app.applicant.models import ApplicantMetadata


class ExtractionMethod(str, Enum):
    """User-selected extraction strategy."""

    STANDARD = "standard"
    AI = "ai"

    @classmethod
    def from_form_value(cls, value: str | None) -> "ExtractionMethod | None":
        """Parse ``standard-method``/``ai-method`` (or the bare names).

        Returns None for blank or unknown values.
        """
        cleaned = (value or "").strip().lower().removesuffix("-method")
        for member in cls:
            if member.value == cleaned:
                return member
        return None


@dataclass(frozen=True)
class UploadedDocument:
    """A single uploaded file, owned by one request."""

    content: bytes
    content_type: str
    filename: str = ""
    size_bytes: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size_bytes", len(self.content))


@dataclass(frozen=True)
class ExtractionRequest:
    """Selected method paired with one document and its applicant."""

    method: ExtractionMethod
    document: UploadedDocument
    applicant: ApplicantMetadata


@dataclass(frozen=True)
class ExtractionResult:
    """Normalized output handed to the display layer."""

    full_name: str
    age: int
    extraction_method: str
    ai_text: str | None = None
    parser_text: str = ""
