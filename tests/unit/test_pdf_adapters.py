import pytest

from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


@pytest.fixture(params=[PdfPlumberAdapter, PyMuPdfAdapter])
def adapter(request: pytest.FixtureRequest) -> BasePdfExtractor:
    return request.param()


class TestPdfAdapters:
    def test_extract_returns_text(
        self, adapter: BasePdfExtractor, sample_pdf_bytes: bytes
    ) -> None:
        result = adapter.extract(sample_pdf_bytes)
        assert isinstance(result, str)
        assert "Hello PDF World" in result

    def test_extract_multi_page(
        self, adapter: BasePdfExtractor, multi_page_pdf_bytes: bytes
    ) -> None:
        result = adapter.extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_empty_pdf_returns_empty_string(
        self, adapter: BasePdfExtractor, empty_pdf_bytes: bytes
    ) -> None:
        assert adapter.extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self, adapter: BasePdfExtractor) -> None:
        with pytest.raises(PdfExtractionError):
            adapter.extract(b"not a pdf")

    def test_extract_result_is_stripped(
        self, adapter: BasePdfExtractor, sample_pdf_bytes: bytes
    ) -> None:
        result = adapter.extract(sample_pdf_bytes)
        assert result == result.strip()
