"""Upload processing routes."""

import asyncio
import functools
from typing import Annotated

from fastapi import APIRouter, File, Form, Request, UploadFile

from app.api.errors import RequestTimeoutError
from app.logging.logger import Log
from app.processor.assembler import ResultAssembler
from app.processor.models import UploadedDocument
from app.upload.validator import canonical_content_type

router = APIRouter(tags=["intake"])

_assembler = ResultAssembler()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/process")
async def process_upload(
    request: Request,
    file: Annotated[UploadFile | None, File()] = None,
    first_name: Annotated[str | None, Form(alias="first-name")] = None,
    last_name: Annotated[str | None, Form(alias="last-name")] = None,
    dob: Annotated[str | None, Form()] = None,
    extraction_method: Annotated[str | None, Form(alias="extraction-method")] = None,
) -> dict[str, object]:
    """Validate an upload, extract its text and return the combined result.

    Heavy work runs on the application's extraction executor so the event
    loop keeps accepting uploads while OCR or the AI call is in progress.
    """
    settings = request.app.state.settings
    document = await _read_document(file, settings.max_upload_bytes)
    raw_fields = {
        "first-name": first_name,
        "last-name": last_name,
        "dob": dob,
        "extraction-method": extraction_method,
    }

    loop = asyncio.get_running_loop()
    work = loop.run_in_executor(
        request.app.state.executor,
        functools.partial(request.app.state.processor.submit, document, raw_fields),
    )
    try:
        result = await asyncio.wait_for(work, timeout=settings.request_timeout_seconds)
    except asyncio.TimeoutError as exc:
        Log.error(f"Upload processing exceeded {settings.request_timeout_seconds}s")
        raise RequestTimeoutError(
            f"Processing exceeded {settings.request_timeout_seconds} seconds"
        ) from exc
    return _assembler.serialize(result)


async def _read_document(
    file: UploadFile | None, max_upload_bytes: int
) -> UploadedDocument | None:
    """Read at most one byte past the ceiling so oversize uploads are still detectable."""
    if file is None:
        return None
    try:
        content = await file.read(max_upload_bytes + 1)
    finally:
        await file.close()
    return UploadedDocument(
        content=content,
        content_type=canonical_content_type(file.content_type),
        filename=file.filename or "",
    )
