"""Display helpers for conversation summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from sqlalchemy.exc import SQLAlchemyError

from jobboard.config import get_settings
from jobboard.domain.errors import MessagingError
from jobboard.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeerDisplay:
    """How the other party of a conversation is rendered."""

    name: str
    role: str | None
    avatar: str | None
    img: str


def generated_avatar_url(seed: str) -> str:
    """Return the deterministic initials avatar for ``seed``."""

    base_url = get_settings().avatar_base_url.rstrip("?")
    return f"{base_url}?seed={quote(seed, safe='')}"


def describe_peer(repository: UserRepository, identifier: str) -> PeerDisplay:
    """Resolve a friendly name and avatar for ``identifier``.

    Profile lookups are cosmetic: any failure falls back to the raw
    identifier and a generated avatar.
    """

    name = identifier
    role: str | None = None
    avatar: str | None = None
    try:
        profile = repository.find_by_identifier(identifier)
    except (MessagingError, SQLAlchemyError) as exc:
        logger.debug("Profile lookup failed for %s: %s", identifier, exc)
        repository.session.rollback()
        profile = None

    if profile is not None:
        name = profile.full_name or name
        role = profile.role
        avatar = profile.avatar_url

    return PeerDisplay(
        name=name,
        role=role,
        avatar=avatar,
        img=avatar or generated_avatar_url(name),
    )


__all__ = ["PeerDisplay", "describe_peer", "generated_avatar_url"]
