"""Sidebar navigation, account summary and standing disclaimer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from models import UserProfile
from view_router import VIEW_LABELS, VIEWS, view_for_label


SimpleCallback = Callable[[], None]

DISCLAIMER_TEXT = (
    "⚠️ This chatbot is not a substitute for a doctor. For emergencies, please contact a "
    "healthcare professional immediately."
)


def render_sidebar(active: str, user: UserProfile, *, on_logout: SimpleCallback) -> str:
    """Render navigation and return the selected view key."""

    sidebar = st.sidebar
    sidebar.markdown("### 🩺 MediSense")
    sidebar.caption("AI health companion")

    labels = [VIEW_LABELS[view] for view in VIEWS]
    index = VIEWS.index(active) if active in VIEWS else 0
    label = sidebar.radio("Navigate", labels, index=index, key="nav_view", label_visibility="collapsed")

    sidebar.divider()
    sidebar.markdown(f"**{user.name}**")
    sidebar.caption(user.email)
    sidebar.button("Log out", on_click=on_logout, key="logout_button")

    sidebar.divider()
    sidebar.caption(DISCLAIMER_TEXT)
    return view_for_label(label)
