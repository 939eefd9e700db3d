"""Streamlit helpers shared by the MediSense views."""

from __future__ import annotations

import streamlit as st

from services.account_service import AccountError
from services.assistant_gateway import AuthFailure, GatewayError, TransportFailure


def show_gateway_error(error: GatewayError, *, st_module=st) -> None:
    """Render a consistent error block for a failed model request."""

    if isinstance(error, AuthFailure):
        st_module.info("Add your Gemini API key in Settings to continue.")
        return
    if isinstance(error, TransportFailure) and error.status is not None:
        st_module.error(f"AI service request failed ({error.status}).")
        st_module.caption(error.body[:500])
        return
    st_module.error(f"AI service request failed: {error}")


def show_account_error(error: AccountError, *, st_module=st) -> None:
    st_module.error(error.message)


__all__ = ["show_account_error", "show_gateway_error"]
