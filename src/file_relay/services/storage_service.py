"""Service layer – object storage backend (S3)."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.file_relay.config import Settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the backend refuses or fails a write."""


class ObjectStorage(Protocol):
    async def put_object(self, key: str, body: bytes, content_type: str) -> None: ...


class S3Storage:
    """Writes objects to a single S3 bucket through boto3."""

    def __init__(self, client, bucket: str) -> None:
        self.client = client
        self.bucket = bucket

    @classmethod
    def from_settings(cls, settings: Settings) -> S3Storage:
        session = boto3.session.Session()
        client = session.client(
            "s3",
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            config=Config(signature_version="s3v4"),
        )
        return cls(client, settings.s3_bucket)

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        """
        Store *body* under *key*.

        The blocking boto3 call runs in a worker thread; the caller is
        suspended until S3 acknowledges the write or the call fails.
        """

        def _upload() -> None:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )

        try:
            await asyncio.to_thread(_upload)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(str(exc)) from exc

        logger.info("Stored s3://%s/%s (%d bytes)", self.bucket, key, len(body))


def public_url(bucket: str, region: str, key: str) -> str:
    """Virtual-hosted–style URL of an object in a public bucket."""
    return f"https://{bucket}.s3.{region}.amazonaws.com/{key}"
