"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in VisionClientFactory.
"""

from typing import ClassVar

from app.vision.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Example adapter that returns a fixed transcription.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[str] = "Example transcription of {filename} ({mime_type})."

    def describe_document(
        self,
        *,
        model: str,
        prompt: str,
        document_b64: str,
        mime_type: str,
        filename: str,
    ) -> str:
        _ = model, prompt, document_b64
        return self.DEFAULT_RESPONSE.format(filename=filename or "document", mime_type=mime_type)
