"""Settings tab renderer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from services.session_store import THEMES, SessionStore
from ui_components import toggle_group


SimpleCallback = Callable[[], None]


def render_tab(session: SessionStore, *, trigger_rerun: SimpleCallback) -> None:
    st.subheader("⚙️ Settings")

    key_input = st.text_input(
        "Gemini API key",
        value=session.api_key(),
        type="password",
        placeholder="AIza...",
        help="Stored locally and sent only to the Gemini API.",
        key="settings_api_key",
    )
    if st.button("Save key", key="settings_save_key"):
        session.set_api_key(key_input)
        st.toast("API key saved.", icon="✅")

    current = session.theme()
    labels = [theme.capitalize() for theme in THEMES]
    selection = toggle_group(
        "Theme",
        labels,
        key="settings_theme",
        default=current.capitalize(),
    )
    chosen = selection.lower()
    if chosen != current:
        session.set_theme(chosen)
        trigger_rerun()
