"""Chat tab renderer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from services.attachments import encode_uploaded_file
from services.chat_orchestrator import ChatOrchestrator, SubmitOutcome
from ui_components import render_chat_bubble


SimpleCallback = Callable[[], None]

IMAGE_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]
_UPLOAD_NONCE_KEY = "chat_upload_nonce"


def _uploader_key() -> str:
    return f"chat_files_{st.session_state.get(_UPLOAD_NONCE_KEY, 0)}"


def _reset_uploader() -> None:
    # A fresh widget key is the only way to clear a file_uploader selection.
    st.session_state[_UPLOAD_NONCE_KEY] = st.session_state.get(_UPLOAD_NONCE_KEY, 0) + 1


def render_tab(orchestrator: ChatOrchestrator, *, trigger_rerun: SimpleCallback) -> None:
    """Render the transcript and the input row for the chat view."""

    messages = orchestrator.messages()
    if not messages:
        st.info("Ask about symptoms, nutrition, fitness, and first-aid. Upload reports for helpful insights.")
    for message in messages:
        render_chat_bubble(message)

    uploads = st.file_uploader(
        "Add image",
        type=IMAGE_TYPES,
        accept_multiple_files=True,
        key=_uploader_key(),
    ) or []
    if uploads:
        st.caption(f"{len(uploads)} file(s) ready to send")

    col_send, col_clear = st.columns([1, 1])
    with col_send:
        send_images = st.button("Send image(s)", disabled=not uploads or orchestrator.busy, key="chat_send_images")
    with col_clear:
        clear_clicked = st.button("Clear chat", disabled=not messages, key="chat_clear")

    prompt = st.chat_input(
        "Describe your symptoms, diet goals, or first-aid question...",
        disabled=orchestrator.busy,
    )

    if clear_clicked:
        orchestrator.clear_history()
        trigger_rerun()
        return

    if prompt is None and not send_images:
        return

    attachments = [encode_uploaded_file(uploaded) for uploaded in uploads]
    with st.spinner("MediSense is thinking..."):
        outcome = orchestrator.submit(prompt or "", attachments)
    if outcome is SubmitOutcome.BUSY:
        st.warning("Please wait for the current reply before sending another message.")
        return
    if outcome is not SubmitOutcome.IGNORED:
        _reset_uploader()
    trigger_rerun()
