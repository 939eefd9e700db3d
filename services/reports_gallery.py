"""Persisted gallery of submitted attachments."""

from __future__ import annotations

from typing import Iterable, List

from models import Report

from .attachments import EncodedAttachment
from .session_store import SessionStore


class ReportsGallery:
    def __init__(self, session: SessionStore) -> None:
        self._session = session

    def list(self) -> List[Report]:
        return self._session.reports()

    def add(self, attachments: Iterable[EncodedAttachment]) -> List[Report]:
        """Prepend one report per attachment, keeping selection order."""

        added = [Report(name=item.name, preview=item.preview) for item in attachments]
        if not added:
            return []
        self._session.save_reports(added + self._session.reports())
        return added

    def remove(self, index: int) -> bool:
        reports = self._session.reports()
        if index < 0 or index >= len(reports):
            return False
        del reports[index]
        self._session.save_reports(reports)
        return True


__all__ = ["ReportsGallery"]
