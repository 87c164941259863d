from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

from app.applicant.models import ApplicantMetadata
from app.extraction.router import StrategySelection
from app.processor.models import ExtractionRequest, ExtractionResult, UploadedDocument
from app.storage.base import BaseDocumentStorage


@dataclass(slots=True)
class PipelineContext:
    raw_fields: Mapping[str, str | None]
    document: UploadedDocument | None
    applicant: ApplicantMetadata | None = None
    request: ExtractionRequest | None = None
    storage: BaseDocumentStorage | None = None
    storage_key: str = ""
    selection: StrategySelection | None = None
    ai_text: str | None = None
    parser_text: str = ""
    strategy_errors: dict[str, str] = field(default_factory=dict)
    result: ExtractionResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
