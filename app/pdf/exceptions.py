class PdfExtractionError(Exception):
    """Raised when a PDF adapter cannot read the byte stream."""
