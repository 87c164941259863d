from app.applicant.models import ApplicantMetadata
from app.extraction.base import BaseExtractionStrategy
from app.extraction.exceptions import MalformedDocumentError
from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError


class PdfTextStrategy(BaseExtractionStrategy):
    """Reads the embedded text layer of a PDF."""

    name = "pdf"
    failure_error = MalformedDocumentError

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def extract(
        self,
        data: bytes,
        content_type: str,
        *,
        applicant: ApplicantMetadata | None = None,
        filename: str = "",
    ) -> str:
        try:
            text = self._pdf_extractor.extract(data)
        except PdfExtractionError as exc:
            raise MalformedDocumentError(str(exc)) from exc
        Log.info(f"PDF strategy extracted {len(text)} chars")
        return text.strip()
