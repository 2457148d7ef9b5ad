"""Root conftest: app and HTTP client fixtures.

Invariants:
    - Every test gets a fresh app built from its own route table
    - Host identity is faked so hostname results are deterministic
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test logs readable and independent of any local .env
os.environ.setdefault("STRINGSVC_LOG_FORMAT", "text")

from stringsvc.api.app import create_app
from stringsvc.config import Settings
from stringsvc.transport.routes import build_routes
from tests.fakes import FakeOSInfoService, RecordingStringService


@pytest.fixture
def string_service():
    return RecordingStringService()


@pytest.fixture
def os_info_service():
    return FakeOSInfoService()


@pytest.fixture
def settings():
    return Settings(log_format="text", log_level="DEBUG")


@pytest.fixture
def app(string_service, os_info_service, settings):
    return create_app(build_routes(string_service, os_info_service), settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
