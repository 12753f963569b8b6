"""Rules for addressing two-party conversations."""

from __future__ import annotations

from collections.abc import Iterable

CONVERSATION_ID_SEPARATOR = "__"


def normalize_identifier(value: object) -> str:
    """Return the canonical, case-insensitive form of a participant identifier."""

    if value is None:
        return ""
    return str(value).strip().lower()


def derive_conversation_id(first: object, second: object) -> str | None:
    """Return the order independent conversation id for two participants.

    Both identifiers are lower-cased and sorted before being joined so either
    party resolves the same id. ``None`` is returned when one of them is
    empty; such a value must never be persisted.
    """

    left = normalize_identifier(first)
    right = normalize_identifier(second)
    if not left or not right:
        return None
    parts = sorted((left, right))
    return CONVERSATION_ID_SEPARATOR.join(parts)


def normalize_participants(values: Iterable[object]) -> list[str]:
    """Return the distinct, sorted participant identifiers from ``values``."""

    unique = {normalize_identifier(value) for value in values}
    unique.discard("")
    return sorted(unique)


def other_participant(
    participants: Iterable[str], caller_identifiers: Iterable[str]
) -> str | None:
    """Return the first participant that does not identify the caller."""

    own = {normalize_identifier(identifier) for identifier in caller_identifiers}
    for participant in participants:
        if normalize_identifier(participant) not in own:
            return participant
    return None


__all__ = [
    "CONVERSATION_ID_SEPARATOR",
    "derive_conversation_id",
    "normalize_identifier",
    "normalize_participants",
    "other_participant",
]
