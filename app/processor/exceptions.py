class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class IntakeValidationError(ProcessorError):
    """Raised when request input is rejected before any extraction runs.

    ``fields`` maps each failing form field to a short reason code.
    """

    def __init__(self, fields: dict[str, str], message: str = "Invalid request") -> None:
        super().__init__(message)
        self.fields = dict(fields)


class UploadRejectedError(IntakeValidationError):
    """Raised when the uploaded file fails presence, type or size checks."""

    def __init__(self, reason: str) -> None:
        super().__init__({"file": reason}, message=f"Upload rejected: {reason}")
        self.reason = reason


class MetadataValidationError(IntakeValidationError):
    """Raised when one or more applicant fields are invalid."""

    def __init__(self, fields: dict[str, str]) -> None:
        super().__init__(fields, message="Invalid applicant metadata")


class UnsupportedDocumentError(IntakeValidationError):
    """Raised when no extraction route exists for a document/method pair."""

    def __init__(self, field: str, detail: str) -> None:
        super().__init__({field: "unsupported"}, message=detail)
