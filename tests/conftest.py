"""Root pytest configuration for s3fs-paths tests."""
import pytest

from s3fs_paths.settings import Settings
from tests.storage.fakes import FakeAttributeStore


# Keep the host environment from leaking into settings
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Automatically clear s3fs-paths environment variables."""
    monkeypatch.delenv("S3FS_DEFAULT_BUCKET", raising=False)
    monkeypatch.delenv("S3FS_ATTRIBUTE_CACHE", raising=False)


# Standardized test fixtures
@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings(default_bucket="test-bucket")


@pytest.fixture
def store():
    """Standard fake attribute store for testing."""
    return FakeAttributeStore()
