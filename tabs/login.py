"""Sign-in / sign-up form."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from models import UserProfile
from services.account_service import AccountError, AccountManager
from ui_components import toggle_group
from utils_streamlit import show_account_error


OnAuth = Callable[[UserProfile], None]

SIGN_IN = "Sign in"
SIGN_UP = "Create account"


def render_tab(accounts: AccountManager, *, on_auth: OnAuth) -> None:
    st.subheader("Welcome to MediSense")
    mode = toggle_group("Mode", [SIGN_IN, SIGN_UP], key="login_mode", default=SIGN_IN)

    with st.form("login_form"):
        name = st.text_input("Name", placeholder="Jane Doe") if mode == SIGN_UP else ""
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button(mode)

    if not submitted:
        return
    try:
        if mode == SIGN_UP:
            profile = accounts.register(email, password, name)
        else:
            profile = accounts.authenticate(email, password)
    except AccountError as exc:
        show_account_error(exc)
        return
    on_auth(profile)
