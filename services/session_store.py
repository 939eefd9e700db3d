"""Typed access to the persisted MediSense session keys."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from local_store import KV, MemoryStore
from models import Message, Report, UserProfile


logger = logging.getLogger(__name__)

API_KEY_KEY = "medisense_api_key"
CURRENT_USER_KEY = "medisense_current_user"
USERS_KEY = "medisense_users"
MESSAGES_KEY = "medisense_messages"
REPORTS_KEY = "medisense_reports"
THEME_KEY = "medisense_theme"
TIP_KEY_PREFIX = "medisense_tip_"

THEMES = ("light", "dark")
DEFAULT_THEME = "light"

T = TypeVar("T")


class ParseFailure(ValueError):
    """Raised internally when a stored value cannot be decoded."""


def tip_key(day_key: str) -> str:
    return f"{TIP_KEY_PREFIX}{day_key}"


def user_key(key: str, user_id: str) -> str:
    return f"{key}_{user_id}"


# Decoders ----------------------------------------------------------------
# Each decoder raises ParseFailure on malformed input; SessionStore turns that
# into the key's documented default.
def decode_profile(raw: Any) -> Optional[UserProfile]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ParseFailure("profile must be an object")
    try:
        return UserProfile.from_dict(raw)
    except ValueError as exc:
        raise ParseFailure(str(exc)) from exc


def decode_users(raw: Any) -> Dict[str, Dict[str, Any]]:
    if not isinstance(raw, Mapping):
        raise ParseFailure("user directory must be an object")
    users: Dict[str, Dict[str, Any]] = {}
    for email, record in raw.items():
        if not isinstance(record, Mapping):
            raise ParseFailure(f"user record for {email!r} must be an object")
        profile = record.get("profile")
        password = record.get("password")
        if not isinstance(profile, Mapping) or not isinstance(password, str):
            raise ParseFailure(f"user record for {email!r} is incomplete")
        users[str(email)] = {"profile": dict(profile), "password": password}
    return users


def decode_messages(raw: Any) -> List[Message]:
    if not isinstance(raw, list):
        raise ParseFailure("messages must be a list")
    try:
        return [Message.from_dict(item) for item in raw]
    except (AttributeError, ValueError) as exc:
        raise ParseFailure(str(exc)) from exc


def decode_reports(raw: Any) -> List[Report]:
    if not isinstance(raw, list) or not all(isinstance(item, Mapping) for item in raw):
        raise ParseFailure("reports must be a list of objects")
    return [Report.from_dict(item) for item in raw]


def decode_text(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ParseFailure("expected a string")
    return raw


def decode_theme(raw: Any) -> str:
    if raw not in THEMES:
        raise ParseFailure(f"unknown theme {raw!r}")
    return raw


class SessionStore:
    """Reads and writes every persisted MediSense key.

    ``kv`` is the durable store shared by every browser session. The signed-in
    profile lives in ``session_kv`` so each browser session signs in on its
    own; transcript, reports, credential and theme are stored under keys
    suffixed with the signed-in user id.
    """

    def __init__(self, kv: KV, session_kv: KV | None = None) -> None:
        self._kv = kv
        self._session_kv = session_kv if session_kv is not None else MemoryStore()

    @property
    def kv(self) -> KV:
        return self._kv

    @property
    def session_kv(self) -> KV:
        return self._session_kv

    def _read(self, key: str, decoder: Callable[[Any], T], default: T, *, kv: KV | None = None) -> T:
        raw = (self._kv if kv is None else kv).get(key)
        if raw is None:
            return default
        try:
            return decoder(json.loads(raw))
        except (json.JSONDecodeError, ParseFailure) as exc:
            logger.debug("Falling back to default for %s: %s", key, exc)
            return default

    def _write(self, key: str, value: Any, *, kv: KV | None = None) -> None:
        (self._kv if kv is None else kv).set(key, json.dumps(value, ensure_ascii=False))

    def _scoped(self, key: str) -> str:
        user = self.current_user()
        return user_key(key, user.id) if user else key

    # Credential ----------------------------------------------------------
    def api_key(self) -> str:
        """Return the signed-in user's key, else the deployment-wide one."""

        scoped = self._scoped(API_KEY_KEY)
        value = self._read(scoped, decode_text, "").strip()
        if value or scoped == API_KEY_KEY:
            return value
        return self._read(API_KEY_KEY, decode_text, "").strip()

    def set_api_key(self, value: str) -> None:
        self._write(self._scoped(API_KEY_KEY), (value or "").strip())

    # Current user --------------------------------------------------------
    def current_user(self) -> Optional[UserProfile]:
        return self._read(CURRENT_USER_KEY, decode_profile, None, kv=self._session_kv)

    def set_current_user(self, profile: UserProfile) -> None:
        self._write(CURRENT_USER_KEY, profile.asdict(), kv=self._session_kv)

    def clear_current_user(self) -> None:
        self._session_kv.remove(CURRENT_USER_KEY)

    # User directory ------------------------------------------------------
    def users(self) -> Dict[str, Dict[str, Any]]:
        return self._read(USERS_KEY, decode_users, {})

    def save_users(self, users: Mapping[str, Mapping[str, Any]]) -> None:
        self._write(USERS_KEY, {email: dict(record) for email, record in users.items()})

    # Transcript ----------------------------------------------------------
    def messages(self) -> List[Message]:
        return self._read(self._scoped(MESSAGES_KEY), decode_messages, [])

    def save_messages(self, messages: Sequence[Message]) -> None:
        self._write(self._scoped(MESSAGES_KEY), [message.asdict() for message in messages])

    # Reports -------------------------------------------------------------
    def reports(self) -> List[Report]:
        return self._read(self._scoped(REPORTS_KEY), decode_reports, [])

    def save_reports(self, reports: Sequence[Report]) -> None:
        self._write(self._scoped(REPORTS_KEY), [report.asdict() for report in reports])

    # Daily tips ----------------------------------------------------------
    def tip(self, day_key: str) -> Optional[str]:
        value = self._read(tip_key(day_key), decode_text, "")
        return value or None

    def save_tip(self, day_key: str, text: str) -> None:
        self._write(tip_key(day_key), text)

    # Theme ---------------------------------------------------------------
    def theme(self) -> str:
        return self._read(self._scoped(THEME_KEY), decode_theme, DEFAULT_THEME)

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"theme must be one of {THEMES}")
        self._write(self._scoped(THEME_KEY), theme)


__all__ = [
    "DEFAULT_THEME",
    "ParseFailure",
    "SessionStore",
    "THEMES",
    "tip_key",
    "user_key",
]
