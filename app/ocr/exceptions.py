class OcrError(Exception):
    """Raised when an image cannot be decoded or recognized."""
