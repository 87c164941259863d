from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for optical character recognition adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Recognize text in an encoded raster image (PNG, JPEG).

        Returns:
            Recognized text, stripped.

        Raises:
            OcrError: on decode or engine failure.
        """
