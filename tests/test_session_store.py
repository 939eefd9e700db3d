import pytest

from local_store import MemoryStore
from models import Message, Report, UserProfile
from services.session_store import (
    API_KEY_KEY,
    CURRENT_USER_KEY,
    MESSAGES_KEY,
    REPORTS_KEY,
    THEME_KEY,
    USERS_KEY,
    SessionStore,
    tip_key,
    user_key,
)


def _session():
    kv = MemoryStore()
    return kv, SessionStore(kv)


def test_messages_round_trip():
    _, session = _session()
    messages = [
        Message(role="user", text="I have a fever", time="2024-01-01 10:00:00"),
        Message(role="assistant", text="Rest and hydrate.", time="2024-01-01 10:00:02"),
    ]
    session.save_messages(messages)

    assert session.messages() == messages


def test_reports_and_users_round_trip():
    _, session = _session()
    reports = [Report(name="scan.png", preview="data:image/png;base64,AAAA")]
    profile = UserProfile(id="a@b.c", email="a@b.c", name="a", created_at="2024-01-01T00:00:00.000+00:00")
    users = {"a@b.c": {"profile": profile.asdict(), "password": "pw"}}
    session.save_reports(reports)
    session.save_users(users)

    assert session.reports() == reports
    assert session.users() == users


def test_malformed_values_fall_back_to_defaults():
    kv, session = _session()
    kv.set(MESSAGES_KEY, "{broken")
    kv.set(REPORTS_KEY, '{"not": "a list"}')
    kv.set(USERS_KEY, '["wrong"]')
    kv.set(THEME_KEY, '"purple"')
    kv.set(tip_key("2024-01-01"), "42")

    assert session.messages() == []
    assert session.reports() == []
    assert session.users() == {}
    assert session.theme() == "light"
    assert session.tip("2024-01-01") is None


def test_message_with_unknown_role_is_treated_as_absent():
    kv, session = _session()
    kv.set(MESSAGES_KEY, '[{"role": "system", "text": "x", "time": ""}]')

    assert session.messages() == []


def test_current_user_set_and_clear():
    _, session = _session()
    profile = UserProfile.create("jane@example.com", "Jane")
    session.set_current_user(profile)

    assert session.current_user() == profile
    session.clear_current_user()
    assert session.current_user() is None


def test_api_key_is_trimmed_and_defaults_empty():
    _, session = _session()

    assert session.api_key() == ""
    session.set_api_key("  AIza-secret  ")
    assert session.api_key() == "AIza-secret"


def test_theme_rejects_unknown_values():
    _, session = _session()
    session.set_theme("dark")

    assert session.theme() == "dark"
    with pytest.raises(ValueError):
        session.set_theme("neon")
    assert session.theme() == "dark"


def test_signed_in_user_data_lives_under_user_keys():
    kv, session = _session()
    profile = UserProfile.create("jane@example.com", "Jane")
    session.set_current_user(profile)
    session.save_messages([Message.user("I have a fever")])
    session.save_reports([Report(name="scan.png", preview="data:image/png;base64,AAAA")])
    session.set_theme("dark")
    session.set_api_key("jane-key")

    assert kv.get(CURRENT_USER_KEY) is None
    assert kv.get(MESSAGES_KEY) is None
    assert kv.get(REPORTS_KEY) is None
    assert kv.get(THEME_KEY) is None
    assert kv.get(API_KEY_KEY) is None
    assert kv.get(user_key(THEME_KEY, "jane@example.com")) == '"dark"'
    assert [m.text for m in session.messages()] == ["I have a fever"]


def test_sessions_sharing_one_store_keep_separate_sign_ins():
    kv = MemoryStore()
    jane = SessionStore(kv, MemoryStore())
    omar = SessionStore(kv, MemoryStore())
    jane.set_current_user(UserProfile.create("jane@example.com", "Jane"))
    jane.save_messages([Message.user("my blood test results")])

    assert omar.current_user() is None
    omar.set_current_user(UserProfile.create("omar@example.com", "Omar"))
    assert omar.messages() == []
    assert omar.reports() == []
    assert [m.text for m in jane.messages()] == ["my blood test results"]


def test_user_api_key_falls_back_to_deployment_key():
    kv, session = _session()
    session.set_api_key("shared-key")
    session.set_current_user(UserProfile.create("jane@example.com", "Jane"))

    assert session.api_key() == "shared-key"
    session.set_api_key("jane-key")
    assert session.api_key() == "jane-key"
    session.clear_current_user()
    assert session.api_key() == "shared-key"
