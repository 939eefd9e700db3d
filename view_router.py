"""Navigation between the MediSense views."""

from __future__ import annotations

from typing import Optional

from models import UserProfile


LOGIN_VIEW = "login"
DEFAULT_VIEW = "chat"

VIEW_LABELS: dict[str, str] = {
    "chat": "Chat",
    "reports": "My Reports",
    "tips": "Health Tips",
    "settings": "Settings",
}
VIEWS: tuple[str, ...] = tuple(VIEW_LABELS)


def resolve_view(user: Optional[UserProfile], active: str | None) -> str:
    """Return the view to render for the signed-in ``user``."""

    if user is None:
        return LOGIN_VIEW
    if active in VIEW_LABELS:
        return active  # type: ignore[return-value]
    return DEFAULT_VIEW


def view_for_label(label: str | None) -> str:
    for key, value in VIEW_LABELS.items():
        if value == label:
            return key
    return DEFAULT_VIEW


__all__ = ["DEFAULT_VIEW", "LOGIN_VIEW", "VIEWS", "VIEW_LABELS", "resolve_view", "view_for_label"]
