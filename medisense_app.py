"""MediSense Streamlit application: wiring, login gate and view routing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import streamlit as st

from app_settings import AppSettings, load_settings
from gemini_client import GeminiClient
from local_store import KV, MemoryStore, open_store
from models import UserProfile
from services.account_service import AccountManager
from services.assistant_gateway import AssistantGateway
from services.chat_orchestrator import ChatOrchestrator
from services.daily_tip import DailyTipCache
from services.reports_gallery import ReportsGallery
from services.session_store import SessionStore
from tabs import chat as chat_tab
from tabs import login as login_tab
from tabs import reports as reports_tab
from tabs import settings as settings_tab
from tabs import tips as tips_tab
from tabs.sidebar import render_sidebar
from ui_components import apply_theme
from view_router import DEFAULT_VIEW, LOGIN_VIEW, resolve_view


LOGGER = logging.getLogger(__name__)

_RERUN_FN = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
_SERVICES_KEY = "_medisense_services"


@dataclass
class AppServices:
    """Everything one browser session needs, built around the shared store."""

    session: SessionStore
    accounts: AccountManager
    gateway: AssistantGateway
    reports: ReportsGallery
    tips: DailyTipCache
    orchestrator: ChatOrchestrator


def build_services(settings: AppSettings, kv: KV, session_kv: KV | None = None) -> AppServices:
    # session_kv holds the sign-in for one browser session; kv is shared.
    session = SessionStore(kv, session_kv if session_kv is not None else MemoryStore())
    if settings.seed_api_key and not session.api_key():
        session.set_api_key(settings.seed_api_key)
    gateway = AssistantGateway(
        GeminiClient(
            base_url=settings.gemini_base,
            model=settings.gemini_model,
            timeout=settings.request_timeout,
        )
    )
    reports = ReportsGallery(session)
    return AppServices(
        session=session,
        accounts=AccountManager(session),
        gateway=gateway,
        reports=reports,
        tips=DailyTipCache(session, gateway),
        orchestrator=ChatOrchestrator(
            session,
            gateway,
            reports,
            pacing_delay=settings.pacing_delay,
        ),
    )


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _trigger_rerun() -> None:
    if _RERUN_FN:
        _RERUN_FN()


def _services() -> AppServices:
    services = st.session_state.get(_SERVICES_KEY)
    if services is None:
        settings = load_settings()
        configure_logging(settings)
        services = build_services(settings, open_store(settings.data_path))
        st.session_state[_SERVICES_KEY] = services
        LOGGER.info("MediSense store at %s", settings.data_path)
    return services


def _handle_auth(profile: UserProfile) -> None:
    LOGGER.info("Signed in %s", profile.email)
    st.session_state.active_view = DEFAULT_VIEW
    _trigger_rerun()


def _handle_logout() -> None:
    _services().accounts.logout()
    st.session_state.active_view = DEFAULT_VIEW
    st.session_state.pop("nav_view", None)


def _render_app() -> None:
    st.set_page_config(page_title="MediSense", page_icon="🩺", layout="wide")
    services = _services()
    apply_theme(services.session.theme())

    st.markdown("## Your caring AI health companion")
    st.caption(
        "Ask about symptoms, nutrition, fitness, and first-aid. Upload reports for helpful insights, "
        "always with a gentle, factual tone."
    )

    user = services.accounts.current_user()
    view = resolve_view(user, st.session_state.get("active_view"))
    if view == LOGIN_VIEW:
        login_tab.render_tab(services.accounts, on_auth=_handle_auth)
        return

    view = render_sidebar(view, user, on_logout=_handle_logout)
    st.session_state.active_view = view

    if view == "chat":
        chat_tab.render_tab(services.orchestrator, trigger_rerun=_trigger_rerun)
    elif view == "reports":
        reports_tab.render_tab(services.reports, trigger_rerun=_trigger_rerun)
    elif view == "tips":
        tips_tab.render_tab(services.tips, api_key=services.session.api_key())
    elif view == "settings":
        settings_tab.render_tab(services.session, trigger_rerun=_trigger_rerun)


def main() -> None:
    """Streamlit entry point for MediSense."""

    _render_app()


if __name__ == "__main__":
    main()
