# backend/app/services/llm.py
from __future__ import annotations

from typing import Any

import requests

from backend.app.core.errors import SummarizationError
from backend.app.core.settings import Settings, get_settings
from backend.app.logging_utils import get_logger

log = get_logger(__name__)

SYSTEM_PROMPT = "You are an expert meeting notes summarizer."
FALLBACK_SUMMARY = "No summary returned"


def build_messages(transcript: str, prompt: str | None = "") -> list[dict[str, str]]:
    """Return the two-message chat payload sent to the completion API."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": f"Instruction: {prompt or ''}\nTranscript: {transcript}"},
    ]


def first_choice_content(data: Any) -> str:
    """Pull ``choices[0].message.content`` out of a completion response, or the fallback."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_SUMMARY
    return content or FALLBACK_SUMMARY


class LLMClient:
    """
    Thin client for an OpenAI-compatible chat completion endpoint.

    One request per call: no retries and no timeout override, so a slow
    upstream holds the calling request until the transport gives up.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        model: str,
        max_tokens: int,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "LLMClient":
        cfg = cfg or get_settings()
        return cls(
            api_url=cfg.LLM_API_URL,
            api_key=cfg.LLM_API_KEY,
            model=cfg.LLM_MODEL,
            max_tokens=cfg.LLM_MAX_TOKENS,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key or ''}",
            "Content-Type": "application/json",
        }

    def summarize(self, transcript: str, prompt: str | None = "") -> str:
        payload = {
            "model": self.model,
            "messages": build_messages(transcript, prompt),
            "max_tokens": self.max_tokens,
        }
        try:
            r = self.session.post(self.api_url, json=payload, headers=self._headers())
            r.raise_for_status()
            data = r.json()
        except requests.HTTPError as exc:
            resp = exc.response
            detail = resp.text if resp is not None else str(exc)
            status = resp.status_code if resp is not None else None
            raise SummarizationError(f"upstream returned {status}: {detail}") from exc
        except requests.RequestException as exc:
            raise SummarizationError(f"upstream request failed: {exc}") from exc
        except ValueError as exc:
            raise SummarizationError(f"upstream returned invalid JSON: {exc}") from exc

        summary = first_choice_content(data)
        log.info(
            "summary generated",
            extra={"model": self.model, "transcript_chars": len(transcript), "summary_chars": len(summary)},
        )
        return summary
