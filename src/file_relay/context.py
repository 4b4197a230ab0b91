"""Process-wide relay context, built once at startup."""

from dataclasses import dataclass

from fastapi import Request

from src.file_relay.config import Settings
from src.file_relay.services.storage_service import ObjectStorage, S3Storage


@dataclass(frozen=True)
class RelayContext:
    storage: ObjectStorage
    bucket: str
    region: str


def build_context(settings: Settings) -> RelayContext:
    return RelayContext(
        storage=S3Storage.from_settings(settings),
        bucket=settings.s3_bucket,
        region=settings.aws_region,
    )


def get_relay_context(request: Request) -> RelayContext:
    """FastAPI dependency – the context installed on ``app.state``."""
    return request.app.state.relay_context
