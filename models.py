"""Shared dataclasses for the MediSense session records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping


USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"
_ROLES = {USER_ROLE, ASSISTANT_ROLE}


def local_timestamp(now: datetime | None = None) -> str:
    """Return the display timestamp attached to chat turns."""

    moment = now or datetime.now()
    return moment.strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class UserProfile:
    """Signed-in account details; ``id`` is the normalised email."""

    id: str
    email: str
    name: str
    created_at: str

    @classmethod
    def create(cls, email: str, name: str | None = None) -> "UserProfile":
        display = (name or "").strip() or email.split("@")[0]
        created_at = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return cls(id=email, email=email, name=display, created_at=created_at)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UserProfile":
        email = str(payload.get("email") or payload.get("id") or "")
        if not email:
            raise ValueError("profile is missing an email")
        return cls(
            id=str(payload.get("id") or email),
            email=email,
            name=str(payload.get("name") or email.split("@")[0]),
            created_at=str(payload.get("createdAt") or payload.get("created_at") or ""),
        )

    def asdict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class Message:
    """A single chat turn."""

    role: str
    text: str
    time: str

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role=USER_ROLE, text=text, time=local_timestamp())

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(role=ASSISTANT_ROLE, text=text, time=local_timestamp())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Message":
        role = payload.get("role")
        if role not in _ROLES:
            raise ValueError(f"unknown message role: {role!r}")
        text = payload.get("text")
        return cls(
            role=str(role),
            text=text if isinstance(text, str) else "",
            time=str(payload.get("time") or ""),
        )

    def asdict(self) -> dict[str, Any]:
        return {"role": self.role, "text": self.text, "time": self.time}


@dataclass(frozen=True)
class Report:
    """An uploaded image kept for later browsing."""

    name: str
    preview: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Report":
        return cls(name=str(payload.get("name") or "file"), preview=str(payload.get("preview") or ""))

    def asdict(self) -> dict[str, Any]:
        return {"name": self.name, "preview": self.preview}


__all__ = [
    "ASSISTANT_ROLE",
    "Message",
    "Report",
    "USER_ROLE",
    "UserProfile",
    "local_timestamp",
]
