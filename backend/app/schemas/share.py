from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ShareIn(BaseModel):
    summary: Optional[str] = None
    emails: Optional[str] = None


class ShareOut(BaseModel):
    message: str
