# backend/app/deps.py
from __future__ import annotations

from functools import lru_cache

from backend.app.services.llm import LLMClient
from backend.app.services.mailer import Mailer


@lru_cache(maxsize=1)
def get_llm_client() -> LLMClient:
    """Shared completion client built from settings; tests override this dependency."""
    return LLMClient.from_settings()


@lru_cache(maxsize=1)
def get_mailer() -> Mailer:
    return Mailer.from_settings()


__all__ = ["get_llm_client", "get_mailer"]
