# frontend/streamlit_app.py
from __future__ import annotations

import os

import streamlit as st

from frontend.frontend_api import DEFAULT_API_BASE, BackendClient
from frontend.shell import (
    EMAIL_SENT,
    ShellState,
    load_upload,
    queue_action,
    run_pending,
    summary_download,
)


# ---------------------------
# Config
# ---------------------------
def _api_base() -> str:
    try:
        return st.secrets.get("API_BASE", os.getenv("API_BASE_URL", DEFAULT_API_BASE))
    except FileNotFoundError:
        # no secrets.toml
        return os.getenv("API_BASE_URL", DEFAULT_API_BASE)


# ---------------------------
# UI helpers
# ---------------------------
def _ensure_session_state() -> ShellState:
    if "shell" not in st.session_state:
        st.session_state.shell = ShellState()
    if "client" not in st.session_state:
        st.session_state.client = BackendClient(_api_base())
    return st.session_state.shell


def _sync_inputs() -> ShellState:
    """Copy the latest widget values into the shell state before an action runs."""
    state: ShellState = st.session_state.shell
    state.transcript = st.session_state.get("transcript_input", state.transcript)
    state.prompt = st.session_state.get("prompt_input", state.prompt)
    state.summary = st.session_state.get("summary_input", state.summary)
    state.emails = st.session_state.get("emails_input", state.emails)
    return state


def _on_upload() -> None:
    upload = st.session_state.get("transcript_file")
    if upload is None:
        return
    state: ShellState = st.session_state.shell
    load_upload(state, upload.type, upload.getvalue())
    # keep the text area widget in step with the new transcript
    st.session_state.transcript_input = state.transcript


def _on_generate() -> None:
    queue_action(_sync_inputs(), "generate")


def _on_share() -> None:
    queue_action(_sync_inputs(), "share")


def _run_pending(state: ShellState) -> None:
    """Make the queued backend call after the busy page has been drawn, then redraw."""
    label = "Generating summary..." if state.pending == "generate" else "Sending email..."
    with st.spinner(label):
        action = run_pending(state, st.session_state.client)
    if action == "generate":
        # the summary widget is refreshed at the top of the next pass
        st.session_state.push_summary = True
    st.rerun()


# ---------------------------
# App
# ---------------------------
def main() -> None:
    st.set_page_config(page_title="Meeting Notes Summarizer", page_icon="📝")
    state = _ensure_session_state()
    if st.session_state.pop("push_summary", False):
        st.session_state.summary_input = state.summary

    st.title("📝 AI-Powered Meeting Notes Summarizer")

    st.file_uploader(
        "Upload Transcript (.txt or .pdf file)",
        type=["txt", "pdf"],
        key="transcript_file",
        on_change=_on_upload,
    )

    state.transcript = st.text_area("Paste Transcript", key="transcript_input", height=200)
    state.prompt = st.text_input(
        "Custom Instruction/Prompt",
        key="prompt_input",
        placeholder="e.g. Summarize in bullet points for executives",
    )

    st.button(
        "Generating..." if state.loading else "Generate Summary",
        disabled=state.loading,
        on_click=_on_generate,
    )

    if state.alert:
        st.warning(state.alert)

    if not state.is_editing:
        if state.pending:
            _run_pending(state)
        return

    st.divider()
    state.summary = st.text_area("Edit Summary", key="summary_input", height=200)

    if state.summary:
        filename, body = summary_download(state)
        st.download_button("Download Summary", data=body, file_name=filename, mime="text/plain")

    state.emails = st.text_input(
        "Recipient Email(s)",
        key="emails_input",
        placeholder="email1@example.com, email2@example.com",
    )

    st.button(
        "Sending..." if state.loading else "Share via Email",
        disabled=state.loading,
        on_click=_on_share,
    )

    if state.email_status:
        if state.email_status == EMAIL_SENT:
            st.success(state.email_status)
        else:
            st.error(state.email_status)

    if state.pending:
        _run_pending(state)


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    main()
