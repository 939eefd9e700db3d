"""Local sign-up and sign-in against the persisted user directory."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from models import UserProfile

from .session_store import SessionStore


logger = logging.getLogger(__name__)


class AccountError(Exception):
    """Base class for account failures carrying a user-facing message."""

    message = "Account request failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingCredentials(AccountError):
    message = "Please enter email and password."


class AlreadyExists(AccountError):
    message = "An account with this email already exists."


class InvalidCredentials(AccountError):
    message = "Invalid email or password."


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class InsecureLocalCredentialStore:
    """Plaintext password directory for local demo accounts.

    Passwords are stored and compared verbatim. Nothing here is suitable for
    real authentication; it only gates which local profile is active.
    """

    def __init__(self, session: SessionStore) -> None:
        self._session = session

    def exists(self, email: str) -> bool:
        return email in self._session.users()

    def insert(self, profile: UserProfile, password: str) -> None:
        users = self._session.users()
        users[profile.email] = {"profile": profile.asdict(), "password": password}
        self._session.save_users(users)

    def verify(self, email: str, password: str) -> Optional[UserProfile]:
        record: Dict[str, Any] | None = self._session.users().get(email)
        if not record or record.get("password") != password:
            return None
        try:
            return UserProfile.from_dict(record["profile"])
        except ValueError:
            logger.warning("Stored profile for %s is unreadable", email)
            return None


class AccountManager:
    """Registers and authenticates users, tracking the current profile."""

    def __init__(self, session: SessionStore, credentials: InsecureLocalCredentialStore | None = None) -> None:
        self._session = session
        self._credentials = credentials or InsecureLocalCredentialStore(session)

    def current_user(self) -> Optional[UserProfile]:
        return self._session.current_user()

    def register(self, email: str, password: str, name: str | None = None) -> UserProfile:
        key = normalize_email(email)
        if not key or not password:
            raise MissingCredentials()
        if self._credentials.exists(key):
            raise AlreadyExists()
        profile = UserProfile.create(key, name)
        self._credentials.insert(profile, password)
        self._session.set_current_user(profile)
        logger.info("Registered local account %s", key)
        return profile

    def authenticate(self, email: str, password: str) -> UserProfile:
        key = normalize_email(email)
        if not key or not password:
            raise MissingCredentials()
        profile = self._credentials.verify(key, password)
        if profile is None:
            raise InvalidCredentials()
        self._session.set_current_user(profile)
        return profile

    def logout(self) -> None:
        self._session.clear_current_user()


__all__ = [
    "AccountError",
    "AccountManager",
    "AlreadyExists",
    "InsecureLocalCredentialStore",
    "InvalidCredentials",
    "MissingCredentials",
    "normalize_email",
]
