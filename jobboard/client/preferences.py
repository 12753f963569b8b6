"""Sticky client preferences that never act as a source of truth."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipientPreference:
    """The last person the user chatted with, for reopening the view."""

    id: str
    name: str | None = None
    avatar: str | None = None


class RecipientPreferenceStore:
    """Remember the last chat recipient in memory or in a JSON file.

    The stored value only preselects a chat; conversation ids are always
    derived from the participants.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._value: RecipientPreference | None = None
        if path is not None:
            self._value = self._load(path)

    def get(self) -> RecipientPreference | None:
        return self._value

    def set(self, preference: RecipientPreference) -> None:
        self._value = preference
        if self._path is not None:
            self._path.write_text(json.dumps(asdict(preference)), encoding="utf-8")

    def clear(self) -> None:
        self._value = None
        if self._path is not None and self._path.exists():
            self._path.unlink()

    @staticmethod
    def _load(path: Path) -> RecipientPreference | None:
        if not path.exists():
            return None
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.debug("Ignoring unreadable recipient preference %s: %s", path, exc)
            return None
        if not isinstance(raw, dict) or not raw.get("id"):
            return None
        return RecipientPreference(
            id=str(raw["id"]),
            name=raw.get("name"),
            avatar=raw.get("avatar"),
        )


__all__ = ["RecipientPreference", "RecipientPreferenceStore"]
