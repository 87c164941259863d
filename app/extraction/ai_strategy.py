"""Cloud AI vision extraction."""

import base64
from pathlib import Path

from app.applicant.models import ApplicantMetadata
from app.extraction.base import BaseExtractionStrategy
from app.extraction.exceptions import UpstreamError, UpstreamUnavailableError
from app.logging.logger import Log
from app.vision.client_base import BaseVisionClient
from app.vision.exceptions import VisionError
from app.vision.prompt_loader import load_prompt_template


class AiVisionStrategy(BaseExtractionStrategy):
    """Sends the raw document to a vision model and returns its reply verbatim.

    When ``client`` is None the provider is not configured and every call
    raises UpstreamUnavailableError with ``unavailable_reason``.
    """

    name = "ai"
    failure_error = UpstreamError

    def __init__(
        self,
        *,
        client: BaseVisionClient | None,
        model: str,
        unavailable_reason: str = "AI provider is not configured",
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._unavailable_reason = unavailable_reason
        self._prompt_template = load_prompt_template(prompt_template_path)

    @property
    def available(self) -> bool:
        return self._client is not None

    def build_prompt(self, applicant: ApplicantMetadata | None) -> str:
        if applicant is None:
            raise ValueError("AI extraction requires applicant metadata")
        return self._prompt_template.format(
            full_name=applicant.full_name,
            dob=applicant.date_of_birth.isoformat(),
        ).strip()

    def extract(
        self,
        data: bytes,
        content_type: str,
        *,
        applicant: ApplicantMetadata | None = None,
        filename: str = "",
    ) -> str:
        if self._client is None:
            raise UpstreamUnavailableError(self._unavailable_reason)

        prompt = self.build_prompt(applicant)
        Log.debug(f"AI prompt:\n{prompt}")
        try:
            reply = self._client.describe_document(
                model=self._model,
                prompt=prompt,
                document_b64=base64.b64encode(data).decode("ascii"),
                mime_type=content_type,
                filename=filename,
            )
        except VisionError as exc:
            raise UpstreamError(str(exc)) from exc
        Log.info(f"AI strategy returned {len(reply)} chars")
        Log.debug(f"AI raw response:\n{reply}")
        return reply
