from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.core.errors import ApiError, DeliveryError
from backend.app.deps import get_mailer
from backend.app.logging_utils import get_logger
from backend.app.schemas.share import ShareIn, ShareOut
from backend.app.services.mailer import Mailer, parse_recipients

log = get_logger(__name__)

router = APIRouter(tags=["share"])


@router.post(
    "/share",
    response_model=ShareOut,
    responses={400: {"model": ApiError}, 500: {"model": ApiError}},
)
def share(
    payload: Optional[ShareIn] = None,
    mailer: Mailer = Depends(get_mailer),
):
    payload = payload or ShareIn()
    if not payload.summary or not payload.emails:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Summary and emails are required",
        )

    recipients = parse_recipients(payload.emails)
    try:
        mailer.send_summary(payload.summary, recipients)
    except DeliveryError as exc:
        log.warning("email sending error", extra={"detail": str(exc), "recipients": len(recipients)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send email",
        ) from exc

    return ShareOut(message="Email(s) sent successfully")
