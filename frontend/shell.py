# frontend/shell.py
"""
UI state and actions for the summarizer page.

The Streamlit script owns rendering only; everything that decides what the
page shows lives here so it can run without a browser. Each action clears
``alert`` on entry and leaves at most one message behind for the page to show.
"""
from __future__ import annotations

from dataclasses import dataclass

from frontend.extraction import ExtractionError, UnsupportedFileType, extract_text
from frontend.frontend_api import BackendClient, BackendUnavailable

EMAIL_SENT = "Email sent successfully!"
CONNECTION_ERROR = "Error connecting to backend"
SUMMARY_FILENAME = "summary.txt"


@dataclass
class ShellState:
    transcript: str = ""
    prompt: str = ""
    summary: str = ""
    emails: str = ""
    is_editing: bool = False
    loading: bool = False
    email_status: str = ""
    alert: str = ""
    # action waiting to run on the next script pass, "generate" or "share"
    pending: str = ""


def load_upload(state: ShellState, mime_type: str | None, data: bytes) -> None:
    state.alert = ""
    try:
        text = extract_text(data, mime_type)
    except UnsupportedFileType:
        state.alert = "Only .txt and .pdf files are supported"
        return
    except ExtractionError:
        state.alert = "Could not read the uploaded file"
        return
    state.transcript = text


def generate_summary(state: ShellState, client: BackendClient) -> None:
    state.alert = ""
    if not state.transcript:
        state.alert = "Please enter the transcript."
        return

    state.loading = True
    state.email_status = ""
    try:
        ok, data = client.summarize(state.transcript, state.prompt)
        if ok:
            state.summary = data.get("summary", "")
            state.is_editing = True
        else:
            state.alert = data.get("error") or "Failed to generate summary"
    except BackendUnavailable:
        state.alert = CONNECTION_ERROR
    finally:
        state.loading = False


def send_email(state: ShellState, client: BackendClient) -> None:
    state.alert = ""
    if not state.summary or not state.emails:
        state.alert = "Please provide both summary and recipient email(s)."
        return

    state.loading = True
    state.email_status = ""
    try:
        ok, data = client.share(state.summary, state.emails)
        if ok:
            state.email_status = EMAIL_SENT
        else:
            state.email_status = data.get("error") or "Failed to send email"
    except BackendUnavailable:
        state.email_status = CONNECTION_ERROR
    finally:
        state.loading = False


def summary_download(state: ShellState) -> tuple[str, bytes]:
    """Filename and body for the local "download summary" button."""
    return SUMMARY_FILENAME, state.summary.encode("utf-8")


ACTIONS = {"generate": generate_summary, "share": send_email}


def queue_action(state: ShellState, action: str) -> None:
    """
    First half of a button press: mark the page busy and remember what to run.

    The page is drawn once with ``loading`` set (buttons disabled) before
    ``run_pending`` makes the network call.
    """
    if action not in ACTIONS:
        raise ValueError(f"unknown action: {action}")
    if state.loading:
        return
    state.loading = True
    state.pending = action


def run_pending(state: ShellState, client: BackendClient) -> str:
    """Run the queued action, if any; returns its name."""
    action, state.pending = state.pending, ""
    if not action:
        return ""
    try:
        ACTIONS[action](state, client)
    finally:
        state.loading = False
    return action
