from typing import ClassVar

from app.processor.exceptions import ProcessorError


class ExtractionError(ProcessorError):
    """Base exception for extraction strategy failures.

    ``kind`` is the stable code reported to callers.
    """

    kind: ClassVar[str] = "extraction-error"


class MalformedDocumentError(ExtractionError):
    """Raised when a PDF byte stream cannot be parsed."""

    kind = "malformed-document"


class RecognitionFailureError(ExtractionError):
    """Raised when OCR cannot decode or recognize an image."""

    kind = "recognition-failure"


class UpstreamUnavailableError(ExtractionError):
    """Raised when the AI provider is not configured (missing credential)."""

    kind = "upstream-unavailable"


class UpstreamError(ExtractionError):
    """Raised when the AI provider call fails or returns nothing usable."""

    kind = "upstream-error"


class ExhaustedExtractionError(ExtractionError):
    """Raised when every strategy attempted for a request produced no text."""

    kind = "exhausted-extraction"
