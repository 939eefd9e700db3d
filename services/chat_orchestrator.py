"""Chat submission loop: topic gate, transcript persistence, model call."""

from __future__ import annotations

import enum
import logging
import time
from typing import Callable, List, Sequence

from models import Message

from .assistant_gateway import AssistantGateway, GatewayError
from .attachments import EncodedAttachment
from .reports_gallery import ReportsGallery
from .session_store import SessionStore
from .topic_gate import TopicGate


logger = logging.getLogger(__name__)

REFUSAL_TEXT = "I'm sorry, I can only assist with health-related questions."
IMAGE_MARKER_TEXT = "[Image uploaded] 🖼️"
NO_CREDENTIAL_TEXT = (
    "🔒 Please add your Gemini API key in Settings to enable smart health guidance. "
    "In the meantime, you can still organize your reports and read daily tips. ❤"
)
DISCLAIMER_SUFFIX = "\n\n🙏 This is general guidance. Please consult a healthcare professional for a diagnosis."
FAILURE_PREFIX = "⚠️ There was an issue contacting the AI service. "


class ChatState(enum.Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting-response"


class SubmitOutcome(enum.Enum):
    IGNORED = "ignored"
    BUSY = "busy"
    REFUSED = "refused"
    NO_CREDENTIAL = "no-credential"
    ANSWERED = "answered"
    FAILED = "failed"


class ChatOrchestrator:
    """Runs one submission at a time against the persisted transcript.

    A submit made while a previous one is still awaiting its response is
    rejected with :attr:`SubmitOutcome.BUSY`.
    """

    def __init__(
        self,
        session: SessionStore,
        gateway: AssistantGateway,
        reports: ReportsGallery,
        *,
        topic_gate: TopicGate | None = None,
        pacing_delay: float = 0.4,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._session = session
        self._gateway = gateway
        self._reports = reports
        self._gate = topic_gate or TopicGate()
        self._pacing_delay = pacing_delay
        self._sleep = sleep
        self._state = ChatState.IDLE

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state is ChatState.AWAITING_RESPONSE

    def messages(self) -> List[Message]:
        return self._session.messages()

    def clear_history(self) -> None:
        self._session.save_messages([])

    def _append(self, message: Message) -> None:
        messages = self._session.messages()
        messages.append(message)
        self._session.save_messages(messages)

    def submit(self, text: str | None, attachments: Sequence[EncodedAttachment] = ()) -> SubmitOutcome:
        trimmed = (text or "").strip()
        files = list(attachments)
        if not trimmed and not files:
            return SubmitOutcome.IGNORED
        if self.busy:
            return SubmitOutcome.BUSY

        # Attachments skip the gate; the model still enforces scope itself.
        if not files and not self._gate.admits(trimmed):
            self._append(Message.assistant(REFUSAL_TEXT))
            return SubmitOutcome.REFUSED

        self._append(Message.user(trimmed or IMAGE_MARKER_TEXT))
        if files:
            self._reports.add(files)

        self._state = ChatState.AWAITING_RESPONSE
        try:
            return self._respond(trimmed, files)
        finally:
            self._state = ChatState.IDLE

    def _respond(self, text: str, files: List[EncodedAttachment]) -> SubmitOutcome:
        credential = self._session.api_key()
        if not credential:
            self._sleep(self._pacing_delay)
            self._append(Message.assistant(NO_CREDENTIAL_TEXT))
            return SubmitOutcome.NO_CREDENTIAL
        try:
            reply = self._gateway.ask(credential, text or None, files)
        except GatewayError as exc:
            logger.warning("Chat request failed: %s", exc)
            self._append(Message.assistant(f"{FAILURE_PREFIX}{exc}"))
            return SubmitOutcome.FAILED
        self._append(Message.assistant(reply + DISCLAIMER_SUFFIX))
        return SubmitOutcome.ANSWERED


__all__ = [
    "ChatOrchestrator",
    "ChatState",
    "DISCLAIMER_SUFFIX",
    "FAILURE_PREFIX",
    "IMAGE_MARKER_TEXT",
    "NO_CREDENTIAL_TEXT",
    "REFUSAL_TEXT",
    "SubmitOutcome",
]
