# Test configuration
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from bfhl.config import Settings  # noqa: E402
from bfhl.dependencies import get_answer_provider  # noqa: E402
from bfhl.main import create_app  # noqa: E402
from tests.fakes import TEST_EMAIL, FakeAnswerProvider  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        OFFICIAL_EMAIL=TEST_EMAIL,
        OPENAI_API_KEY="test-key",
        MAX_FIBONACCI_TERMS=1000,
        _env_file=None,
    )


@pytest.fixture
def fake_provider() -> FakeAnswerProvider:
    return FakeAnswerProvider()


@pytest.fixture
def app(settings, fake_provider):
    application = create_app(settings)
    application.dependency_overrides[get_answer_provider] = lambda: fake_provider
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
