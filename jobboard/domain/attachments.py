"""Encoding of attachment shares as plain chat text.

Attachments travel as ordinary messages whose text follows a fixed shape so
any client can render them without extra fields::

    Shared photo
    Shared photo: cv.png
    Shared documents: cv.pdf, cover.pdf
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

ATTACHMENT_TYPES: Final[tuple[str, ...]] = ("photo", "video", "document")

_WITH_FILES = re.compile(r"^Shared\s+(photo|video|document)s?\s*:\s*(.+)$", re.IGNORECASE)
_WITHOUT_FILES = re.compile(r"^Shared\s+(photo|video|document)s?$", re.IGNORECASE)


@dataclass(frozen=True)
class AttachmentNote:
    """Attachment information recovered from a message text."""

    attachment_type: str
    files: list[str] = field(default_factory=list)


def encode_attachment_note(attachment_type: str, file_names: Iterable[str] = ()) -> str:
    """Return the message text announcing shared files of ``attachment_type``."""

    kind = attachment_type.strip().lower()
    if kind not in ATTACHMENT_TYPES:
        raise ValueError(f"Unsupported attachment type: {attachment_type!r}")

    names = [name.strip() for name in file_names if name and name.strip()]
    if not names:
        return f"Shared {kind}"
    plural = "s" if len(names) > 1 else ""
    return f"Shared {kind}{plural}: {', '.join(names)}"


def parse_attachment_note(text: object) -> AttachmentNote | None:
    """Return the attachment encoded in ``text`` or ``None`` for plain messages."""

    if not isinstance(text, str):
        return None

    stripped = text.strip()
    match = _WITH_FILES.match(stripped)
    if match:
        files = [name.strip() for name in match.group(2).split(",") if name.strip()]
        return AttachmentNote(attachment_type=match.group(1).lower(), files=files)

    match = _WITHOUT_FILES.match(stripped)
    if match:
        return AttachmentNote(attachment_type=match.group(1).lower())
    return None


__all__ = [
    "ATTACHMENT_TYPES",
    "AttachmentNote",
    "encode_attachment_note",
    "parse_attachment_note",
]
