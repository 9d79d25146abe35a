from __future__ import annotations

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure repo-root imports work (e.g., "backend.*", "frontend.*")
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# -----------------------------------------------------------------------------
# Environment defaults for tests
# -----------------------------------------------------------------------------

os.environ.setdefault("LLM_API_KEY", "test-llm-key")
os.environ.setdefault("EMAIL_USER", "notes@example.com")
os.environ.setdefault("EMAIL_PASS", "app-password")

from backend.app.core.errors import DeliveryError, SummarizationError  # noqa: E402
from backend.app.deps import get_llm_client, get_mailer  # noqa: E402
from backend.app.main import app  # noqa: E402


# -----------------------------------------------------------------------------
# Upstream fakes
# -----------------------------------------------------------------------------


class FakeLLM:
    def __init__(self, summary: str = "- Roadmap agreed", error: Exception | None = None):
        self.summary = summary
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def summarize(self, transcript: str, prompt: str = "") -> str:
        self.calls.append((transcript, prompt))
        if self.error is not None:
            raise self.error
        return self.summary


class FakeMailer:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent: list[tuple[str, list[str]]] = []

    def send_summary(self, summary: str, recipients) -> None:
        self.sent.append((summary, list(recipients)))
        if self.error is not None:
            raise self.error


# -----------------------------------------------------------------------------
# Test client + helpers
# -----------------------------------------------------------------------------


@pytest.fixture()
def fake_llm():
    return FakeLLM()


@pytest.fixture()
def fake_mailer():
    return FakeMailer()


@pytest.fixture()
def client(fake_llm, fake_mailer):
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    app.dependency_overrides[get_mailer] = lambda: fake_mailer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def failing_llm():
    return FakeLLM(error=SummarizationError("upstream returned 503: overloaded"))


@pytest.fixture()
def failing_mailer():
    return FakeMailer(error=DeliveryError("535 Username and Password not accepted"))
