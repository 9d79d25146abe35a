from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.core.errors import ApiError, SummarizationError
from backend.app.deps import get_llm_client
from backend.app.logging_utils import get_logger
from backend.app.schemas.summaries import SummarizeIn, SummarizeOut
from backend.app.services.llm import LLMClient

log = get_logger(__name__)

router = APIRouter(tags=["summaries"])


@router.post(
    "/summarize",
    response_model=SummarizeOut,
    responses={400: {"model": ApiError}, 500: {"model": ApiError}},
)
def summarize(
    payload: Optional[SummarizeIn] = None,
    llm: LLMClient = Depends(get_llm_client),
):
    # a request without a body is treated as an empty object
    payload = payload or SummarizeIn()
    if not payload.transcript:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Transcript is required")

    try:
        summary = llm.summarize(payload.transcript, payload.prompt or "")
    except SummarizationError as exc:
        log.warning("completion API error", extra={"detail": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate summary",
        ) from exc

    return SummarizeOut(summary=summary)
