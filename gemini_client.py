"""Thin client for the Gemini ``generateContent`` REST surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import requests

from app_settings import DEFAULT_GEMINI_BASE, DEFAULT_GEMINI_MODEL


logger = logging.getLogger(__name__)


class GeminiHTTPError(Exception):
    """Non-success response (or no response at all) from the endpoint."""

    def __init__(self, status: int | None, body: str) -> None:
        super().__init__(f"{status} {body}" if status is not None else body)
        self.status = status
        self.body = body


def text_part(text: str) -> dict[str, Any]:
    return {"text": text}


def inline_part(data: str, mime_type: str) -> dict[str, Any]:
    return {"inlineData": {"data": data, "mimeType": mime_type}}


def build_generate_request(parts: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    """Return a single-turn ``generateContent`` body."""

    return {"contents": [{"role": "user", "parts": [dict(part) for part in parts]}]}


def extract_text(payload: Any) -> str:
    """Join the text parts of the first candidate with newlines."""

    if not isinstance(payload, Mapping):
        return ""
    candidates = payload.get("candidates")
    if not isinstance(candidates, Sequence) or not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, Mapping) else None
    parts = content.get("parts") if isinstance(content, Mapping) else None
    if not isinstance(parts, Sequence):
        return ""
    texts = [
        part["text"]
        for part in parts
        if isinstance(part, Mapping) and isinstance(part.get("text"), str)
    ]
    return "\n".join(texts)


@dataclass
class GeminiClient:
    """REST client for one Gemini model."""

    base_url: str = DEFAULT_GEMINI_BASE
    model: str = DEFAULT_GEMINI_MODEL
    timeout: float = 30.0

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, api_key: str, parts: Sequence[Mapping[str, Any]]) -> Mapping[str, Any]:
        """POST ``parts`` and return the decoded JSON body."""

        try:
            response = requests.post(
                self.endpoint,
                params={"key": api_key},
                json=build_generate_request(parts),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", self.endpoint, exc)
            raise GeminiHTTPError(None, str(exc)) from exc

        if not response.ok:
            logger.error("Gemini error (%s) from %s", response.status_code, self.endpoint)
            raise GeminiHTTPError(response.status_code, response.text)
        try:
            body = response.json()
        except ValueError as exc:
            raise GeminiHTTPError(response.status_code, response.text) from exc
        return body if isinstance(body, Mapping) else {}


__all__ = [
    "GeminiClient",
    "GeminiHTTPError",
    "build_generate_request",
    "extract_text",
    "inline_part",
    "text_part",
]
