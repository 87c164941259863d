from app.applicant.models import ApplicantMetadata
from app.extraction.base import BaseExtractionStrategy
from app.extraction.exceptions import RecognitionFailureError
from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError


class OcrStrategy(BaseExtractionStrategy):
    """Recognizes text in a raster image."""

    name = "ocr"
    failure_error = RecognitionFailureError

    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def extract(
        self,
        data: bytes,
        content_type: str,
        *,
        applicant: ApplicantMetadata | None = None,
        filename: str = "",
    ) -> str:
        try:
            text = self._ocr_engine.recognize(data)
        except OcrError as exc:
            raise RecognitionFailureError(str(exc)) from exc
        Log.info(f"OCR strategy recognized {len(text)} chars from {content_type}")
        return text.strip()
