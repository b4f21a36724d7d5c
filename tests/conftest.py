"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from inference import CompletionResponse, ModelBackend, ProviderError  # noqa: E402
from infra import InfraBootstrap  # noqa: E402


@pytest.fixture
def api_key(monkeypatch):
    """Configure a fake provider credential."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-123")
    return "sk-test-123"


@pytest.fixture
def no_api_key(monkeypatch):
    """Ensure no provider credential is visible."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture(autouse=True)
def reset_bootstrap():
    InfraBootstrap.reset()
    yield
    InfraBootstrap.reset()


def _make_backend(output=None, error=None) -> MagicMock:
    """Create a mock ModelBackend returning one canned response."""
    backend = MagicMock(spec=ModelBackend)
    if error is not None:
        backend.generate.return_value = CompletionResponse(status="error", error=error)
    else:
        backend.generate.return_value = CompletionResponse(status="success", output=output)
    return backend


def provider_error(kind, message=None, status_code=None) -> ProviderError:
    return ProviderError(kind=kind, message=message, status_code=status_code)


@pytest.fixture
def make_backend():
    """Factory fixture: make_backend(output=...) or make_backend(error=...)."""
    return _make_backend


@pytest.fixture
def make_provider_error():
    return provider_error
