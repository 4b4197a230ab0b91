import pytest

from src.file_relay.context import RelayContext
from src.file_relay.main import app
from src.file_relay.services.storage_service import StorageError

TEST_BUCKET = "test-bucket"
TEST_REGION = "eu-west-1"


class RecordingStorage:
    """In-memory stand-in for S3 that remembers every write."""

    def __init__(self, error: str | None = None) -> None:
        self.error = error
        self.calls: list[dict] = []

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        self.calls.append({"key": key, "body": body, "content_type": content_type})
        if self.error is not None:
            raise StorageError(self.error)


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def failing_storage() -> RecordingStorage:
    return RecordingStorage(error="An error occurred (AccessDenied) when calling the PutObject operation: Access Denied")


@pytest.fixture
def context(storage: RecordingStorage) -> RelayContext:
    return RelayContext(storage=storage, bucket=TEST_BUCKET, region=TEST_REGION)


@pytest.fixture(autouse=True)
def install_context(context: RelayContext):
    app.state.relay_context = context
    yield
    app.state.relay_context = None
