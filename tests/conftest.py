# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Builds Settings from explicit values (never from the developer's .env)
# - Wires services to in-memory fakes, an httpx MockTransport and a
#   stubbed boto3 client, so no test touches the network
# =============================================================================

import boto3
import httpx
import pytest
from botocore.config import Config
from botocore.stub import Stubber

from app.config import Settings
from core.services import AvatarService, MediaService, VideoService, VoiceService
from lib.clients import ServiceContext
from tests.fakes import InMemoryDatabase, RecordingEvents, VendorStub

TEST_CONFIG = {
    "SUPABASE_URL": "https://test-project.supabase.co",
    "SUPABASE_SERVICE_KEY": "test-service-key",
    "HEYGEN_API_KEY": "test-heygen-key",
    "HEYGEN_API_URL": "https://api.heygen.test",
    "VOICE_WEBHOOK_URL": "https://hooks.test/voice-deleted",
    "S3_ACCESS_KEY_ID": "test-access-key",
    "S3_SECRET_ACCESS_KEY": "test-secret-key",
    "S3_ENDPOINT": "https://storage.test/",
    "S3_BUCKET": "media",
}


def make_settings(**overrides) -> Settings:
    """Settings from TEST_CONFIG; pass NAME=None to simulate a missing value."""
    values = {**TEST_CONFIG, **overrides}
    return Settings(_env_file=None, **values)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Fully configured settings."""
    return make_settings()


@pytest.fixture
def vendor():
    """Stub answering HeyGen and webhook calls (200 by default)."""
    return VendorStub()


@pytest.fixture
def http_client(vendor):
    client = httpx.Client(transport=httpx.MockTransport(vendor.handler))
    yield client
    client.close()


@pytest.fixture
def s3_client():
    """Real boto3 S3 client pointed at a fake endpoint; pair it with Stubber."""
    return boto3.client(
        "s3",
        region_name="us-east-1",
        endpoint_url="https://storage.test",
        aws_access_key_id="test-access-key",
        aws_secret_access_key="test-secret-key",
        config=Config(s3={"addressing_style": "path"}),
    )


@pytest.fixture
def s3_stub(s3_client):
    with Stubber(s3_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def context(settings, http_client, s3_client):
    """ServiceContext wired to the stubbed HTTP and S3 clients."""
    return ServiceContext(settings, http=http_client, s3=s3_client)


@pytest.fixture
def events():
    return RecordingEvents()


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def avatar_service(context, events, db):
    return AvatarService(context, events, database=db)


@pytest.fixture
def voice_service(context, events, db):
    return VoiceService(context, events, database=db)


@pytest.fixture
def video_service(context, events, db):
    return VideoService(context, events, database=db)


@pytest.fixture
def media_service(context, events):
    return MediaService(context, events)
