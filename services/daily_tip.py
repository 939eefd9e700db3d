"""Once-per-day wellness tip, cached in the session store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .assistant_gateway import AssistantGateway, GatewayError
from .session_store import SessionStore


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def day_key_for(moment: datetime) -> str:
    return moment.date().isoformat()


class DailyTipCache:
    def __init__(
        self,
        session: SessionStore,
        gateway: AssistantGateway,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._session = session
        self._gateway = gateway
        self._clock = clock
        self.last_error: GatewayError | None = None

    def today(self) -> str:
        return day_key_for(self._clock())

    def cached(self, day_key: str | None = None) -> Optional[str]:
        return self._session.tip(day_key or self.today())

    def get(self, credential: str | None, day_key: str | None = None) -> Optional[str]:
        """Return the tip for ``day_key``, fetching it at most once per day."""

        key = day_key or self.today()
        self.last_error = None
        cached = self._session.tip(key)
        if cached:
            return cached
        if not credential:
            return None
        try:
            tip = self._gateway.daily_tip(credential)
        except GatewayError as exc:
            logger.warning("Daily tip request failed: %s", exc)
            self.last_error = exc
            return None
        if not tip:
            return None
        self._session.save_tip(key, tip)
        return tip


__all__ = ["DailyTipCache", "day_key_for"]
