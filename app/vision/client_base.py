from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific vision-capable model clients."""

    @abstractmethod
    def describe_document(
        self,
        *,
        model: str,
        prompt: str,
        document_b64: str,
        mime_type: str,
        filename: str,
    ) -> str:
        """Send an instruction plus an inline base64 document, return the reply text."""
