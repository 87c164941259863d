from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text-layer extraction adapters."""

    name: str = "pdf"

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the embedded text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined by newlines, stripped. Empty for scanned PDFs.

        Raises:
            PdfExtractionError: if the bytes are not a readable PDF.
        """
