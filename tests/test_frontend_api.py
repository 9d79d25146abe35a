from __future__ import annotations

import pytest
import requests

from frontend.frontend_api import BackendClient, BackendUnavailable


class FakeResponse:
    def __init__(self, status_code, data):
        self.status_code = status_code
        self._data = data

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._data is None:
            raise ValueError("not json")
        return self._data


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc:
            raise self.exc
        return self.response


def test_summarize_posts_json_to_backend():
    session = FakeSession(FakeResponse(200, {"summary": "s"}))
    client = BackendClient("http://api.test/", session=session)

    assert client.summarize("t", "p") == (True, {"summary": "s"})
    url, kwargs = session.calls[0]
    assert url == "http://api.test/summarize"
    assert kwargs["json"] == {"transcript": "t", "prompt": "p"}
    assert kwargs["timeout"] is None


def test_error_payload_is_returned_not_raised():
    session = FakeSession(FakeResponse(500, {"error": "Failed to send email"}))
    client = BackendClient("http://api.test", session=session)
    assert client.share("s", "a@b.com") == (False, {"error": "Failed to send email"})


def test_non_json_error_body():
    client = BackendClient("http://api.test", session=FakeSession(FakeResponse(502, None)))
    assert client.share("s", "a@b.com") == (False, {})


def test_transport_failure_raises_backend_unavailable():
    client = BackendClient("http://api.test", session=FakeSession(exc=requests.ConnectionError("refused")))
    with pytest.raises(BackendUnavailable):
        client.summarize("t", "")


def test_default_base_url_from_env(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://backend:5000")
    assert BackendClient()._full("/share") == "http://backend:5000/share"
