# backend/app/services/mailer.py
from __future__ import annotations

import smtplib
from email.message import EmailMessage
from typing import Sequence

from backend.app.core.errors import DeliveryError
from backend.app.core.settings import Settings, get_settings
from backend.app.logging_utils import get_logger

log = get_logger(__name__)


def parse_recipients(emails: str) -> list[str]:
    """
    Split a comma-separated recipient string into trimmed addresses.

    Empty tokens (e.g. from a trailing comma) are kept; the relay decides
    what to do with them.
    """
    return [email.strip() for email in emails.split(",")]


def build_message(sender: str | None, recipients: Sequence[str], subject: str, body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = sender or ""
    msg["To"] = ", ".join(recipients)
    msg["Subject"] = subject
    msg.set_content(body)
    return msg


class Mailer:
    """Sends plain-text summaries through an SMTP-over-SSL relay."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        subject: str,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.subject = subject

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "Mailer":
        cfg = cfg or get_settings()
        return cls(
            host=cfg.SMTP_HOST,
            port=cfg.SMTP_PORT,
            username=cfg.EMAIL_USER,
            password=cfg.EMAIL_PASS,
            subject=cfg.EMAIL_SUBJECT,
        )

    def send_summary(self, summary: str, recipients: Sequence[str]) -> None:
        try:
            # header values with CR/LF are refused by EmailMessage
            msg = build_message(self.username, recipients, self.subject, summary)
            with smtplib.SMTP_SSL(self.host, self.port) as server:
                if self.username:
                    server.login(self.username, self.password or "")
                server.send_message(msg, from_addr=self.username, to_addrs=list(recipients))
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            raise DeliveryError(str(exc)) from exc

        log.info("summary emailed", extra={"recipients": len(recipients)})
