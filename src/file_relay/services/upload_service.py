"""Service layer – upload validation and relay to object storage."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

from src.file_relay.config import ALLOWED_MEDIA_TYPES
from src.file_relay.context import RelayContext
from src.file_relay.services.storage_service import StorageError, public_url

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "File uploaded successfully"
FAILURE_MESSAGE = "Error uploading file"


# ──────────────────────────────────────────────
# Data model
# ──────────────────────────────────────────────
@dataclass(frozen=True)
class UploadRequest:
    """A decoded file part. Name and type come straight from the client."""
    content: bytes
    filename: str
    content_type: str
    size: int


@dataclass(frozen=True)
class UploadResult:
    success: bool
    message: str
    file_url: str | None = None
    file_name: str | None = None
    error: str | None = None


class RejectionReason(str, Enum):
    MISSING_FILE = "missing_file"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    UNEXPECTED_FIELD = "unexpected_field"


@dataclass(frozen=True)
class ValidationResult:
    accepted: bool
    reason: RejectionReason | None = None
    detail: str = ""

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(accepted=True)

    @classmethod
    def rejected(cls, reason: RejectionReason, detail: str) -> ValidationResult:
        return cls(accepted=False, reason=reason, detail=detail)


# ──────────────────────────────────────────────
# Validation
# ──────────────────────────────────────────────
def validate_upload(
    filename: str | None,
    content_type: str | None,
    size: int | None,
    max_size: int,
) -> ValidationResult:
    """
    Check a file part before anything is sent to storage.

    Checks run in order: presence, declared media type, size. The first
    failing check decides the reason. A size of ``None`` (not known yet)
    skips the size check.
    """
    if not filename:
        return ValidationResult.rejected(RejectionReason.MISSING_FILE, "No file uploaded")

    if content_type not in ALLOWED_MEDIA_TYPES:
        return ValidationResult.rejected(
            RejectionReason.UNSUPPORTED_MEDIA_TYPE,
            "Invalid file type. Only documents, images, and videos are allowed.",
        )

    if size is not None and size > max_size:
        return ValidationResult.rejected(
            RejectionReason.PAYLOAD_TOO_LARGE,
            f"File too large. Maximum size is {max_size // (1024 * 1024)}MB.",
        )

    return ValidationResult.ok()


def reject_extra_parts() -> ValidationResult:
    return ValidationResult.rejected(RejectionReason.UNEXPECTED_FIELD, "Unexpected field")


# ──────────────────────────────────────────────
# Storage keys
# ──────────────────────────────────────────────
def file_extension(filename: str) -> str:
    """Extension of the last path component, dot included (``""`` if none)."""
    return PurePosixPath(filename.replace("\\", "/")).suffix


def generate_storage_key(filename: str) -> str:
    return f"{uuid.uuid4()}{file_extension(filename)}"


# ──────────────────────────────────────────────
# Relay
# ──────────────────────────────────────────────
async def relay_upload(context: RelayContext, upload: UploadRequest) -> UploadResult:
    """Write *upload* to the bucket under a fresh key and report its URL."""
    key = generate_storage_key(upload.filename)

    try:
        await context.storage.put_object(key, upload.content, upload.content_type)
    except StorageError as exc:
        logger.exception("Error uploading file %r as %s", upload.filename, key)
        return UploadResult(success=False, message=FAILURE_MESSAGE, error=str(exc))

    return UploadResult(
        success=True,
        message=SUCCESS_MESSAGE,
        file_url=public_url(context.bucket, context.region, key),
        file_name=key,
    )
