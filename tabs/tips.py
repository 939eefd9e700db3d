"""Daily health tip tab renderer."""

from __future__ import annotations

import streamlit as st

from services.daily_tip import DailyTipCache
from utils_streamlit import show_gateway_error


def render_tab(tips: DailyTipCache, *, api_key: str, st_module=st) -> None:
    """Show today's tip, fetching it once when a key is configured."""

    st_module.subheader("💡 Daily Health Tip")
    day_key = tips.today()
    tip = tips.cached(day_key)
    if tip:
        st_module.success(tip)
        st_module.caption(f"Tip for {day_key}")
        return
    if not api_key:
        # Errors from an earlier key no longer apply once it is removed.
        tips.last_error = None
        st_module.info("Add your Gemini API key in Settings to get a personalized daily tip.")
        return
    with st_module.spinner("Fetching today's tip..."):
        tip = tips.get(api_key, day_key)
    if tip:
        st_module.success(tip)
        st_module.caption(f"Tip for {day_key}")
    elif tips.last_error is not None:
        show_gateway_error(tips.last_error, st_module=st_module)
