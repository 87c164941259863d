import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Runs Tesseract through pytesseract on a Pillow-decoded image."""

    def __init__(self, language: str = "eng", tesseract_cmd: str | None = None) -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes) -> str:
        image = self._decode(image_bytes)
        Log.debug(f"Running Tesseract (lang={self._language}) on {image.size} image")
        try:
            text = pytesseract.image_to_string(image, lang=self._language)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise OcrError(f"Tesseract failed: {exc}") from exc
        return (text or "").strip()

    @staticmethod
    def _decode(image_bytes: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
        except Image.DecompressionBombError as exc:
            raise OcrError(f"Image too large to decode: {exc}") from exc
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise OcrError(f"Cannot decode image: {exc}") from exc
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        return image
