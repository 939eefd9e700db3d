"""Keyword admission filter for text-only chat queries."""

from __future__ import annotations

from typing import Iterable


_DEFAULT_ALLOWED_TOPICS = (
    "health",
    "wellness",
    "diet",
    "nutrition",
    "fitness",
    "exercise",
    "first aid",
    "first-aid",
    "medical",
    "medicine",
    "mental health",
    "stress",
    "sleep",
    "hydration",
    "injury",
    "symptom",
    "doctor",
    "physician",
    "rash",
    "report",
    "lab",
    "blood test",
    "cholesterol",
    "diabetes",
    "bp",
    "blood pressure",
    "pain",
    "fever",
    "cough",
    "cold",
    "flu",
    "headache",
)


class TopicGate:
    """Substring match against an allow list; no stemming or negation."""

    def __init__(self, terms: Iterable[str] | None = None) -> None:
        source = _DEFAULT_ALLOWED_TOPICS if terms is None else terms
        self._terms = tuple(term.lower() for term in source if term)

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def admits(self, text: str | None) -> bool:
        lowered = (text or "").lower()
        return any(term in lowered for term in self._terms)


__all__ = ["TopicGate"]
