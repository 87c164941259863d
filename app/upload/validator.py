from collections.abc import Iterable
from enum import Enum

from app.logging.logger import Log
from app.processor.exceptions import UploadRejectedError
from app.processor.models import UploadedDocument

DEFAULT_ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "application/pdf")
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_CONTENT_TYPE_ALIASES = {"image/jpg": "image/jpeg"}


class RejectionReason(str, Enum):
    MISSING = "missing"
    UNSUPPORTED_TYPE = "unsupported-type"
    TOO_LARGE = "too-large"


def canonical_content_type(value: str | None) -> str:
    """Lower-case a declared MIME type, drop parameters and resolve aliases."""
    base = (value or "").split(";", 1)[0].strip().lower()
    return _CONTENT_TYPE_ALIASES.get(base, base)


class UploadValidator:
    """Checks presence, MIME allow-list and size ceiling of an upload."""

    def __init__(
        self,
        allowed_content_types: Iterable[str] = DEFAULT_ALLOWED_CONTENT_TYPES,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> None:
        self._allowed = frozenset(canonical_content_type(t) for t in allowed_content_types)
        self._max_upload_bytes = max_upload_bytes

    def validate(self, document: UploadedDocument | None) -> None:
        """Raise UploadRejectedError on the first failing check.

        Order: presence, content type, size.
        """
        if document is None or document.size_bytes == 0:
            raise self._reject(RejectionReason.MISSING, "no file content")
        content_type = canonical_content_type(document.content_type)
        if content_type not in self._allowed:
            raise self._reject(
                RejectionReason.UNSUPPORTED_TYPE,
                f"content type '{document.content_type}' not allowed",
            )
        if document.size_bytes > self._max_upload_bytes:
            raise self._reject(
                RejectionReason.TOO_LARGE,
                f"{document.size_bytes} bytes exceeds {self._max_upload_bytes}",
            )

    @staticmethod
    def _reject(reason: RejectionReason, detail: str) -> UploadRejectedError:
        Log.info(f"Upload rejected ({reason.value}): {detail}")
        return UploadRejectedError(reason.value)
