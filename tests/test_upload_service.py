"""Tests for upload validation, storage keys and the relay step."""

import asyncio

import pytest

from src.file_relay.config import ALLOWED_MEDIA_TYPES
from src.file_relay.context import RelayContext
from src.file_relay.services.upload_service import (
    RejectionReason,
    UploadRequest,
    file_extension,
    generate_storage_key,
    reject_extra_parts,
    relay_upload,
    validate_upload,
)

MAX_SIZE = 50 * 1024 * 1024


# ──────────────────────────────────────────────
# validate_upload
# ──────────────────────────────────────────────
@pytest.mark.parametrize("media_type", sorted(ALLOWED_MEDIA_TYPES))
def test_validate_accepts_allowed_types(media_type: str) -> None:
    assert validate_upload("file.bin", media_type, 10, MAX_SIZE).accepted


@pytest.mark.parametrize("filename", [None, ""])
def test_validate_missing_file(filename) -> None:
    result = validate_upload(filename, "application/pdf", 10, MAX_SIZE)
    assert not result.accepted
    assert result.reason is RejectionReason.MISSING_FILE
    assert result.detail == "No file uploaded"


@pytest.mark.parametrize(
    "media_type",
    ["application/x-msdownload", "application/zip", "text/html", "APPLICATION/PDF", None],
)
def test_validate_unsupported_media_type(media_type) -> None:
    result = validate_upload("a.pdf", media_type, 10, MAX_SIZE)
    assert not result.accepted
    assert result.reason is RejectionReason.UNSUPPORTED_MEDIA_TYPE


def test_validate_payload_too_large() -> None:
    assert validate_upload("a.mp4", "video/mp4", MAX_SIZE, MAX_SIZE).accepted

    result = validate_upload("a.mp4", "video/mp4", MAX_SIZE + 1, MAX_SIZE)
    assert not result.accepted
    assert result.reason is RejectionReason.PAYLOAD_TOO_LARGE
    assert result.detail == "File too large. Maximum size is 50MB."


def test_validate_type_checked_before_size() -> None:
    result = validate_upload("a.exe", "application/x-msdownload", MAX_SIZE + 1, MAX_SIZE)
    assert result.reason is RejectionReason.UNSUPPORTED_MEDIA_TYPE


# ──────────────────────────────────────────────
# Storage keys
# ──────────────────────────────────────────────
@pytest.mark.parametrize(
    ("filename", "extension"),
    [
        ("a.pdf", ".pdf"),
        ("report.final.DOCX", ".DOCX"),
        ("archive.tar.gz", ".gz"),
        ("README", ""),
        (".bashrc", ""),
        ("photos/cat.png", ".png"),
        ("C:\\Users\\me\\clip.mov", ".mov"),
        ("some.dir/noext", ""),
    ],
)
def test_file_extension(filename: str, extension: str) -> None:
    assert file_extension(filename) == extension


def test_storage_key_keeps_extension() -> None:
    key = generate_storage_key("a.pdf")
    assert key.endswith(".pdf")
    assert len(key) == 36 + len(".pdf")


def test_storage_keys_are_unique() -> None:
    keys = {generate_storage_key("a.pdf") for _ in range(1000)}
    assert len(keys) == 1000


# ──────────────────────────────────────────────
# relay_upload
# ──────────────────────────────────────────────
def _pdf() -> UploadRequest:
    return UploadRequest(content=b"0123456789", filename="a.pdf", content_type="application/pdf", size=10)


def test_relay_upload_success(storage, context: RelayContext) -> None:
    result = asyncio.run(relay_upload(context, _pdf()))

    assert result.success
    assert result.message == "File uploaded successfully"
    assert result.file_name.endswith(".pdf")
    assert result.file_url == (
        f"https://{context.bucket}.s3.{context.region}.amazonaws.com/{result.file_name}"
    )
    assert result.error is None
    assert storage.calls == [
        {"key": result.file_name, "body": b"0123456789", "content_type": "application/pdf"},
    ]


def test_relay_upload_identical_content_distinct_keys(storage, context: RelayContext) -> None:
    async def run_many() -> list[str]:
        return [(await relay_upload(context, _pdf())).file_name for _ in range(1000)]

    names = asyncio.run(run_many())

    assert len(set(names)) == 1000
    assert all(name.endswith(".pdf") for name in names)
    assert len(storage.calls) == 1000


def test_relay_upload_backend_failure(failing_storage, context: RelayContext) -> None:
    failing = RelayContext(storage=failing_storage, bucket=context.bucket, region=context.region)

    result = asyncio.run(relay_upload(failing, _pdf()))

    assert not result.success
    assert result.message == "Error uploading file"
    assert "Access Denied" in result.error
    assert result.file_url is None
    assert len(failing_storage.calls) == 1


def test_validate_unknown_size_skips_size_check() -> None:
    assert validate_upload("a.pdf", "application/pdf", None, MAX_SIZE).accepted


def test_reject_extra_parts() -> None:
    result = reject_extra_parts()
    assert not result.accepted
    assert result.reason is RejectionReason.UNEXPECTED_FIELD
    assert result.detail == "Unexpected field"
