"""Reusable Streamlit UI primitives."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from models import USER_ROLE, Message


DARK_THEME_CSS = """
<style>
.stApp {background-color:#0f172a;color:#e2e8f0;}
.stApp [data-testid="stSidebar"] {background-color:#020617;}
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label, .stApp span {color:#e2e8f0;}
</style>
"""


def theme_css(theme: str) -> str:
    """Return the CSS block that applies ``theme`` (empty for light)."""

    return DARK_THEME_CSS if theme == "dark" else ""


def apply_theme(theme: str, *, st_module=st) -> None:
    css = theme_css(theme)
    if css:
        st_module.markdown(css, unsafe_allow_html=True)


def avatar_for(role: str) -> str:
    return "🙂" if role == USER_ROLE else "🩺"


def render_chat_bubble(message: Message, *, st_module=st) -> None:
    """Render one transcript turn with its timestamp."""

    with st_module.chat_message(message.role, avatar=avatar_for(message.role)):
        st_module.markdown(message.text)
        if message.time:
            st_module.caption(message.time)


def toggle_group(
    label: str,
    options: Sequence[str],
    *,
    key: str,
    default: str | None = None,
    help_text: str | None = None,
    st_module=st,
) -> str:
    """Render a segmented toggle and return the selected option."""

    if default and default in options:
        index = list(options).index(default)
    else:
        index = 0
    return st_module.radio(
        label,
        options,
        index=index,
        help=help_text,
        key=key,
        horizontal=True,
    )


__all__ = ["apply_theme", "avatar_for", "render_chat_bubble", "theme_css", "toggle_group"]
