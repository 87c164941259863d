from abc import ABC, abstractmethod

from app.applicant.models import ApplicantMetadata
from app.extraction.exceptions import ExtractionError


class BaseExtractionStrategy(ABC):
    """Contract shared by every text extraction strategy."""

    name: str = "strategy"
    # Error reported when the strategy fails in a way its backend did not classify.
    failure_error: type[ExtractionError] = ExtractionError

    @property
    def available(self) -> bool:
        """False when the strategy cannot run at all in this process."""
        return True

    @abstractmethod
    def extract(
        self,
        data: bytes,
        content_type: str,
        *,
        applicant: ApplicantMetadata | None = None,
        filename: str = "",
    ) -> str:
        """Extract text from a document.

        Args:
            data: Raw document bytes; never mutated.
            content_type: Canonical MIME type of ``data``.
            applicant: Applicant details, used by strategies that build prompts.
            filename: Declared client filename, empty when unknown.

        Returns:
            Extracted text (possibly empty).

        Raises:
            ExtractionError: subclass identifying the failure kind.
        """
