"""Encode user-selected files for inline transport and previews."""

from __future__ import annotations

import base64
import binascii
import mimetypes
from dataclasses import dataclass
from typing import Any


DEFAULT_MIME_TYPE = "image/png"


@dataclass(frozen=True)
class EncodedAttachment:
    name: str
    mime_type: str
    data: str

    @property
    def preview(self) -> str:
        """``data:`` URI stored with reports."""

        return f"data:{self.mime_type};base64,{self.data}"


def decode_preview(preview: str) -> bytes | None:
    """Return the raw bytes behind a ``data:`` URI preview, if any."""

    header, sep, payload = (preview or "").partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        return None
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return None


def _resolve_mime(name: str, mime_type: str | None) -> str:
    if mime_type:
        return mime_type
    guessed, _ = mimetypes.guess_type(name)
    return guessed or DEFAULT_MIME_TYPE


def encode_attachment(name: str, data: bytes, mime_type: str | None = None) -> EncodedAttachment:
    return EncodedAttachment(
        name=name or "file",
        mime_type=_resolve_mime(name or "", mime_type),
        data=base64.b64encode(data).decode("ascii"),
    )


def encode_uploaded_file(uploaded: Any) -> EncodedAttachment:
    """Adapt a Streamlit ``UploadedFile`` (``name``, ``type``, ``getvalue``)."""

    name = getattr(uploaded, "name", None) or "file"
    return encode_attachment(name, uploaded.getvalue(), getattr(uploaded, "type", None))


__all__ = [
    "DEFAULT_MIME_TYPE",
    "EncodedAttachment",
    "decode_preview",
    "encode_attachment",
    "encode_uploaded_file",
]
