"""Build MediSense prompts and call the remote model."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from gemini_client import GeminiClient, GeminiHTTPError, extract_text, inline_part, text_part

from .attachments import EncodedAttachment


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are MediSense, an AI Healthcare Assistant. Your role is to help users with medical, "
    "fitness, and wellness-related queries only. If the query is outside this scope, respond: "
    "\"I'm sorry, I can only assist with health-related questions.\" Capabilities: "
    "- You can analyze text-based symptom descriptions. "
    "- You can interpret uploaded medical images or reports to give possible insights. "
    "- You can suggest preventive care, healthy diets, exercises, and stress management tips. "
    "- Always encourage users to seek professional medical advice for final diagnosis. "
    "Tone: Polite, caring, and factual. Avoid any misleading or unsafe medical advice."
)

TIPS_PROMPT = (
    "Share one concise, practical daily wellness tip (diet, fitness, sleep, stress, hydration, "
    "posture). Keep it under 40 words. Tone: friendly, encouraging, factual."
)

NO_RESPONSE_TEXT = "I could not generate a response."


class GatewayError(Exception):
    """Base class for failures surfaced by :class:`AssistantGateway`."""


class AuthFailure(GatewayError):
    def __init__(self) -> None:
        super().__init__("No Gemini API key configured.")


class TransportFailure(GatewayError):
    def __init__(self, status: Optional[int], body: str) -> None:
        detail = f"{status} {body}" if status is not None else body
        super().__init__(f"Gemini error: {detail}")
        self.status = status
        self.body = body


class AssistantGateway:
    """Wraps :class:`GeminiClient` with the MediSense instruction sets."""

    def __init__(self, client: GeminiClient | None = None) -> None:
        self._client = client or GeminiClient()

    @property
    def client(self) -> GeminiClient:
        return self._client

    def ask(
        self,
        credential: str | None,
        text: str | None = None,
        attachments: Iterable[EncodedAttachment] = (),
    ) -> str:
        """Send one chat turn and return the model's reply text."""

        parts = [text_part(SYSTEM_PROMPT)]
        if text:
            parts.append(text_part(text))
        for attachment in attachments:
            parts.append(inline_part(attachment.data, attachment.mime_type))
        reply = self._generate(credential, parts)
        return reply or NO_RESPONSE_TEXT

    def daily_tip(self, credential: str | None) -> str:
        """Return one short wellness tip, or ``""`` when none came back."""

        return self._generate(credential, [text_part(TIPS_PROMPT)]).strip()

    def _generate(self, credential: str | None, parts: list[dict]) -> str:
        if not credential:
            raise AuthFailure()
        try:
            payload = self._client.generate(credential, parts)
        except GeminiHTTPError as exc:
            raise TransportFailure(exc.status, exc.body) from exc
        return extract_text(payload)


__all__ = [
    "AssistantGateway",
    "AuthFailure",
    "GatewayError",
    "NO_RESPONSE_TEXT",
    "SYSTEM_PROMPT",
    "TIPS_PROMPT",
    "TransportFailure",
]
