"""Router – file upload relay."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from src.file_relay.config import UPLOAD_FIELD, settings
from src.file_relay.context import RelayContext, get_relay_context
from src.file_relay.schemas.upload import ErrorResponse, UploadFailureResponse, UploadResponse
from src.file_relay.services.upload_service import (
    RejectionReason,
    UploadRequest,
    ValidationResult,
    reject_extra_parts,
    relay_upload,
    validate_upload,
)

router = APIRouter(tags=["Upload"])

REJECTION_STATUS: dict[RejectionReason, int] = {
    RejectionReason.MISSING_FILE: 400,
    RejectionReason.UNSUPPORTED_MEDIA_TYPE: 400,
    RejectionReason.PAYLOAD_TOO_LARGE: 413,
    RejectionReason.UNEXPECTED_FIELD: 400,
}


def _rejection(validation: ValidationResult) -> JSONResponse:
    return JSONResponse(
        status_code=REJECTION_STATUS[validation.reason],
        content=ErrorResponse(error=validation.detail).model_dump(),
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": UploadFailureResponse},
    },
)
async def upload_file(
    request: Request,
    context: RelayContext = Depends(get_relay_context),
):
    """
    Store one file in the bucket and return its public URL.

    Parameters
    ----------
    file : multipart part – document, image or video, at most 50 MB.

    Returns
    -------
    UploadResponse with:
        - fileUrl  : public URL of the stored object
        - fileName : generated storage key (uuid + original extension)
    """
    max_size = settings.max_upload_size

    async with request.form() as form:
        # ── exactly one file part under the upload field ──
        parts = [part for part in form.getlist(UPLOAD_FIELD) if isinstance(part, UploadFile)]
        if len(parts) > 1:
            return _rejection(reject_extra_parts())
        file = parts[0] if parts else None

        # ── name, declared type and parsed size, before reading anything ──
        if file is None:
            validation = validate_upload(None, None, None, max_size)
        else:
            validation = validate_upload(file.filename, file.content_type, file.size, max_size)
        if not validation.accepted:
            return _rejection(validation)

        # ── read at most one byte past the ceiling ──
        content = await file.read(max_size + 1)
        validation = validate_upload(file.filename, file.content_type, len(content), max_size)
        if not validation.accepted:
            return _rejection(validation)

        upload = UploadRequest(
            content=content,
            filename=file.filename,
            content_type=file.content_type,
            size=len(content),
        )

    # ── relay to S3 ──
    result = await relay_upload(context, upload)

    if not result.success:
        return JSONResponse(
            status_code=500,
            content=UploadFailureResponse(message=result.message, error=result.error).model_dump(),
        )

    return UploadResponse(
        message=result.message,
        fileUrl=result.file_url,
        fileName=result.file_name,
    )
