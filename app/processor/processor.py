from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import Executor
from contextlib import AbstractContextManager
from pathlib import Path

from app.applicant.clock import BaseClock, SystemClock
from app.applicant.normalizer import MetadataNormalizer
from app.config.settings import Settings
from app.extraction.ai_strategy import AiVisionStrategy
from app.extraction.ocr_strategy import OcrStrategy
from app.extraction.pdf_strategy import PdfTextStrategy
from app.extraction.router import ExtractionRouter
from app.logging.logger import Log
from app.ocr.tesseract_adapter import TesseractAdapter
from app.pdf.factory import PdfExtractorFactory
from app.processor.assembler import ResultAssembler
from app.processor.exceptions import ProcessorError
from app.processor.models import ExtractionResult, UploadedDocument
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    AssembleResultStep,
    ExtractTextStep,
    RouteStep,
    StoreDocumentStep,
    ValidateInputStep,
)
from app.storage.base import BaseDocumentStorage
from app.storage.temp_dir_storage import TempDirStorage
from app.upload.validator import UploadValidator
from app.vision.exceptions import VisionConfigurationError
from app.vision.factory import VisionClientFactory

StorageFactory = Callable[[], AbstractContextManager[BaseDocumentStorage]]


class Processor:
    """Orchestrates one upload through the extraction pipeline.

    Pipeline: validate -> route -> store -> extract -> assemble.
    Validation and routing run before any scratch storage is opened; the remaining
    steps run inside a storage scope that is always cleaned up.
    """

    def __init__(
        self,
        *,
        intake_steps: Sequence[PipelineStep],
        steps: Sequence[PipelineStep],
        storage_factory: StorageFactory,
    ) -> None:
        self._intake_steps = list(intake_steps)
        self._steps = list(steps)
        self._storage_factory = storage_factory

    def submit(
        self,
        document: UploadedDocument | None,
        raw_fields: Mapping[str, str | None],
    ) -> ExtractionResult:
        """Run the full pipeline for one upload.

        Raises:
            IntakeValidationError: when the upload or fields are rejected.
            ExtractionError: when extraction fails.
        """
        context = PipelineContext(raw_fields=raw_fields, document=document)
        try:
            for step in self._intake_steps:
                context = step.run(context)
            with self._storage_factory() as storage:
                context.storage = storage
                for step in self._steps:
                    context = step.run(context)
        except ProcessorError as exc:
            Log.warning(f"Upload processing stopped: {type(exc).__name__}: {exc}")
            raise

        if context.result is None:
            raise RuntimeError("Pipeline finished without producing a result")
        Log.info(
            f"Processed upload for method={context.result.extraction_method}: "
            f"ai_text={'yes' if context.result.ai_text is not None else 'no'}, "
            f"parser_text={len(context.result.parser_text)} chars, "
            f"failed_strategies={context.strategy_errors or 'none'}"
        )
        return context.result


def build_ai_strategy(settings: Settings) -> AiVisionStrategy:
    """Build the AI strategy; a misconfigured provider yields an unavailable strategy."""
    try:
        client = VisionClientFactory.create(settings)
    except VisionConfigurationError as exc:
        Log.warning(f"AI extraction unavailable: {exc}")
        return AiVisionStrategy(
            client=None,
            model=settings.ai_model_name,
            unavailable_reason=str(exc),
        )
    Log.info(
        f"AI extraction via provider '{VisionClientFactory.provider_name(settings)}' "
        f"model '{settings.ai_model_name}'"
    )
    return AiVisionStrategy(client=client, model=settings.ai_model_name)


def build_processor(
    settings: Settings,
    *,
    remote_executor: Executor | None = None,
    clock: BaseClock | None = None,
    scratch_root: Path | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if scratch_root is None and settings.scratch_dir:
        scratch_root = Path(settings.scratch_dir)

    upload_validator = UploadValidator(
        allowed_content_types=settings.allowed_content_types,
        max_upload_bytes=settings.max_upload_bytes,
    )
    metadata_normalizer = MetadataNormalizer(clock or SystemClock(settings.timezone))
    router = ExtractionRouter(
        pdf_strategy=PdfTextStrategy(PdfExtractorFactory.create(settings)),
        ocr_strategy=OcrStrategy(
            TesseractAdapter(language=settings.ocr_language, tesseract_cmd=settings.tesseract_cmd)
        ),
        ai_strategy=build_ai_strategy(settings),
    )
    return Processor(
        intake_steps=[
            ValidateInputStep(upload_validator, metadata_normalizer),
            RouteStep(router),
        ],
        steps=[
            StoreDocumentStep(),
            ExtractTextStep(
                remote_executor=remote_executor,
                ai_unavailable_policy=settings.ai_unavailable_policy,
            ),
            AssembleResultStep(ResultAssembler()),
        ],
        storage_factory=lambda: TempDirStorage.session(scratch_root),
    )
