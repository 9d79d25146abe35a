from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class SummarizeIn(BaseModel):
    # Presence is checked in the router, which owns the field-specific
    # 400 message.
    transcript: Optional[str] = None
    prompt: Optional[str] = None


class SummarizeOut(BaseModel):
    summary: str
