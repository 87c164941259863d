from dataclasses import dataclass

from app.extraction.base import BaseExtractionStrategy
from app.logging.logger import Log
from app.processor.exceptions import UnsupportedDocumentError
from app.processor.models import ExtractionMethod, ExtractionRequest
from app.upload.validator import canonical_content_type

PDF_KIND = "pdf"
IMAGE_KIND = "image"


@dataclass(frozen=True)
class StrategySelection:
    """Strategies chosen for one request.

    ``parser`` always runs; ``ai`` runs alongside it for the ``ai`` method.
    """

    parser: BaseExtractionStrategy
    ai: BaseExtractionStrategy | None = None

    @property
    def strategies(self) -> list[BaseExtractionStrategy]:
        return [s for s in (self.ai, self.parser) if s is not None]


def document_kind(content_type: str) -> str | None:
    if content_type == "application/pdf":
        return PDF_KIND
    if content_type.startswith("image/"):
        return IMAGE_KIND
    return None


class ExtractionRouter:
    """Selects strategies from (content type, requested method).

    method    | pdf         | image       | other
    standard  | pdf         | ocr         | unsupported
    ai        | ai + pdf    | ai + ocr    | unsupported
    """

    def __init__(
        self,
        *,
        pdf_strategy: BaseExtractionStrategy,
        ocr_strategy: BaseExtractionStrategy,
        ai_strategy: BaseExtractionStrategy,
    ) -> None:
        self._parsers: dict[str, BaseExtractionStrategy] = {
            PDF_KIND: pdf_strategy,
            IMAGE_KIND: ocr_strategy,
        }
        self._ai_strategy = ai_strategy

    def route(self, request: ExtractionRequest) -> StrategySelection:
        content_type = canonical_content_type(request.document.content_type)
        kind = document_kind(content_type)
        parser = self._parsers.get(kind) if kind is not None else None
        if parser is None:
            raise UnsupportedDocumentError(
                "file", f"No extraction route for content type '{content_type}'"
            )

        ai = self._ai_strategy if request.method is ExtractionMethod.AI else None
        selection = StrategySelection(parser=parser, ai=ai)
        Log.info(
            f"Routed {content_type} ({request.method.value}) to "
            f"{[s.name for s in selection.strategies]}"
        )
        return selection
