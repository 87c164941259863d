import io
from unittest.mock import patch

import pytesseract
import pytest
from PIL import Image

from app.ocr.exceptions import OcrError
from app.ocr.tesseract_adapter import TesseractAdapter


class TestTesseractAdapter:
    def test_returns_stripped_text(self, sample_png_bytes: bytes) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="  Hello OCR \n\f",
        ) as mock_ocr:
            result = TesseractAdapter().recognize(sample_png_bytes)
        assert result == "Hello OCR"
        assert mock_ocr.call_args.kwargs["lang"] == "eng"

    def test_passes_configured_language(self, sample_png_bytes: bytes) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string", return_value=""
        ) as mock_ocr:
            TesseractAdapter(language="deu").recognize(sample_png_bytes)
        assert mock_ocr.call_args.kwargs["lang"] == "deu"

    def test_converts_palette_images_to_rgb(self) -> None:
        buf = io.BytesIO()
        Image.new("P", (8, 8)).save(buf, format="PNG")
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string", return_value="x"
        ) as mock_ocr:
            TesseractAdapter().recognize(buf.getvalue())
        image = mock_ocr.call_args.args[0]
        assert image.mode == "RGB"

    def test_raises_on_undecodable_bytes(self) -> None:
        with pytest.raises(OcrError, match="Cannot decode image"):
            TesseractAdapter().recognize(b"not an image")

    def test_oversized_image_is_a_decode_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        buf = io.BytesIO()
        Image.new("1", (64, 64)).save(buf, format="PNG")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
        with patch("app.ocr.tesseract_adapter.pytesseract.image_to_string") as mock_ocr:
            with pytest.raises(OcrError, match="too large"):
                TesseractAdapter().recognize(buf.getvalue())
        mock_ocr.assert_not_called()

    def test_raises_when_tesseract_missing(self, sample_png_bytes: bytes) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            side_effect=pytesseract.TesseractNotFoundError(),
        ):
            with pytest.raises(OcrError, match="Tesseract failed"):
                TesseractAdapter().recognize(sample_png_bytes)

    def test_sets_tesseract_cmd(self) -> None:
        with patch.object(pytesseract.pytesseract, "tesseract_cmd", "tesseract"):
            TesseractAdapter(tesseract_cmd="/opt/bin/tesseract")
            assert pytesseract.pytesseract.tesseract_cmd == "/opt/bin/tesseract"
