# frontend/frontend_api.py
from __future__ import annotations

import os
from typing import Any

import requests

DEFAULT_API_BASE = "http://localhost:5000"


class BackendUnavailable(ConnectionError):
    """The backend could not be reached (refused, DNS, reset, ...)."""


class BackendClient:
    """
    Tiny wrapper around the summarizer backend.

    ``post_json`` returns ``(ok, payload)`` for every HTTP response so callers
    can tell application errors from transport failures, which raise
    ``BackendUnavailable``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url or os.getenv("API_BASE_URL", DEFAULT_API_BASE)
        self.timeout = timeout
        self.session = session or requests.Session()

    def _full(self, path: str) -> str:
        """Return an absolute URL for the API, accepting either absolute or relative paths."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def post_json(self, path: str, body: dict[str, Any]) -> tuple[bool, dict[str, Any]]:
        try:
            r = self.session.post(self._full(path), json=body, timeout=self.timeout)
        except requests.RequestException as exc:
            raise BackendUnavailable(str(exc)) from exc
        try:
            payload = r.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        return r.ok, payload

    def summarize(self, transcript: str, prompt: str) -> tuple[bool, dict[str, Any]]:
        return self.post_json("/summarize", {"transcript": transcript, "prompt": prompt})

    def share(self, summary: str, emails: str) -> tuple[bool, dict[str, Any]]:
        return self.post_json("/share", {"summary": summary, "emails": emails})
