from concurrent.futures import Executor, Future
from dataclasses import replace

from app.applicant.normalizer import MetadataNormalizer
from app.extraction.base import BaseExtractionStrategy
from app.extraction.exceptions import (
    ExhaustedExtractionError,
    ExtractionError,
    UpstreamUnavailableError,
)
from app.extraction.router import ExtractionRouter
from app.logging.logger import Log
from app.processor.assembler import ResultAssembler
from app.processor.exceptions import IntakeValidationError
from app.processor.models import ExtractionMethod, ExtractionRequest
from app.processor.pipeline import PipelineContext, PipelineStep
from app.upload.validator import UploadValidator, canonical_content_type

METHOD_FIELD = "extraction-method"

AI_POLICY_FAIL = "fail"
AI_POLICY_DEGRADE = "degrade"


class ValidateInputStep(PipelineStep):
    """Validates the upload and the applicant fields, reporting all failures together."""

    def __init__(
        self,
        upload_validator: UploadValidator,
        metadata_normalizer: MetadataNormalizer,
    ) -> None:
        self._upload_validator = upload_validator
        self._metadata_normalizer = metadata_normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        errors: dict[str, str] = {}

        try:
            self._upload_validator.validate(context.document)
        except IntakeValidationError as exc:
            errors.update(exc.fields)

        try:
            context.applicant = self._metadata_normalizer.normalize(context.raw_fields)
        except IntakeValidationError as exc:
            errors.update(exc.fields)

        raw_method = (context.raw_fields.get(METHOD_FIELD) or "").strip()
        method = ExtractionMethod.from_form_value(raw_method or ExtractionMethod.STANDARD.value)
        if method is None:
            errors[METHOD_FIELD] = "unsupported"

        if errors or method is None or context.document is None or context.applicant is None:
            raise IntakeValidationError(errors)

        context.document = replace(
            context.document,
            content_type=canonical_content_type(context.document.content_type),
        )
        context.request = ExtractionRequest(
            method=method,
            document=context.document,
            applicant=context.applicant,
        )
        Log.info(
            f"Accepted {context.document.content_type} upload "
            f"({context.document.size_bytes} bytes, method={method.value})"
        )
        return context


class RouteStep(PipelineStep):
    def __init__(self, router: ExtractionRouter) -> None:
        self._router = router

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.request is None:
            raise ValueError("PipelineContext.request must be set before routing")
        context.selection = self._router.route(context.request)
        return context


class StoreDocumentStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.storage is None or context.document is None:
            raise ValueError("PipelineContext.storage and document must be set before storing")
        context.storage_key = context.storage.save(
            context.document.content, context.document.filename
        )
        Log.debug(f"Stored upload as {context.storage_key}")
        return context


class ExtractTextStep(PipelineStep):
    """Runs the selected strategies and applies the fallback rules.

    The AI strategy runs on ``remote_executor`` while the local parser runs
    in the calling thread. A failure of one does not stop the other; only
    when neither yields text does the request fail.
    """

    def __init__(
        self,
        remote_executor: Executor | None = None,
        ai_unavailable_policy: str = AI_POLICY_FAIL,
    ) -> None:
        if ai_unavailable_policy not in (AI_POLICY_FAIL, AI_POLICY_DEGRADE):
            raise ValueError(f"Unknown ai_unavailable_policy '{ai_unavailable_policy}'")
        self._remote_executor = remote_executor
        self._ai_unavailable_policy = ai_unavailable_policy

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.selection is None or context.request is None or context.storage is None:
            raise ValueError("PipelineContext.selection must be set before extraction")

        data = context.storage.read(context.storage_key)
        selection = context.selection

        ai_future: Future[str] | None = None
        if selection.ai is not None:
            if not selection.ai.available and self._ai_unavailable_policy == AI_POLICY_FAIL:
                raise UpstreamUnavailableError(
                    "AI extraction requested but provider is unavailable"
                )
            ai_future = self._start_ai(selection.ai, data, context)

        parser_error: ExtractionError | None = None
        try:
            context.parser_text = _run_strategy(selection.parser, data, context)
        except ExtractionError as exc:
            if selection.ai is None:
                raise
            parser_error = exc
            _record_failure(context, selection.parser, exc)

        ai_error: ExtractionError | None = None
        if ai_future is not None and selection.ai is not None:
            try:
                context.ai_text = ai_future.result()
            except ExtractionError as exc:
                ai_error = exc
                _record_failure(context, selection.ai, exc)

        if parser_error is not None and ai_error is not None:
            raise parser_error

        if not context.parser_text.strip() and not (context.ai_text or "").strip():
            failures = f", failures: {context.strategy_errors}" if context.strategy_errors else ""
            raise ExhaustedExtractionError(
                f"No text extracted by {[s.name for s in selection.strategies]}{failures}"
            )
        return context

    def _start_ai(
        self,
        strategy: BaseExtractionStrategy,
        data: bytes,
        context: PipelineContext,
    ) -> Future[str]:
        if self._remote_executor is not None:
            return self._remote_executor.submit(_run_strategy, strategy, data, context)
        future: Future[str] = Future()
        try:
            future.set_result(_run_strategy(strategy, data, context))
        except ExtractionError as exc:
            future.set_exception(exc)
        return future


def _run_strategy(
    strategy: BaseExtractionStrategy, data: bytes, context: PipelineContext
) -> str:
    """Run one strategy, reporting unclassified failures as its ``failure_error``."""
    if context.request is None:
        raise ValueError("PipelineContext.request must be set before extraction")
    document = context.request.document
    try:
        return strategy.extract(
            data,
            document.content_type,
            applicant=context.applicant,
            filename=document.filename,
        )
    except ExtractionError:
        raise
    except Exception as exc:
        Log.exception(f"{strategy.name} strategy raised {type(exc).__name__}")
        raise strategy.failure_error(f"{strategy.name} strategy failed: {exc}") from exc


def _record_failure(
    context: PipelineContext, strategy: BaseExtractionStrategy, exc: ExtractionError
) -> None:
    context.strategy_errors[strategy.name] = exc.kind
    Log.warning(f"{strategy.name} strategy failed ({exc.kind}): {exc}")


class AssembleResultStep(PipelineStep):
    def __init__(self, assembler: ResultAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.request is None or context.applicant is None:
            raise ValueError("PipelineContext.request must be set before assembly")
        context.result = self._assembler.assemble(
            context.applicant,
            context.request.method,
            context.ai_text,
            context.parser_text,
        )
        return context
