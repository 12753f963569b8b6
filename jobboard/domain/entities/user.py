"""Domain entities describing users and authenticated callers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Public profile of a job board user."""

    id: int | None
    email: str
    role: str = "user"
    full_name: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an employer/administrator."""

        return self.role.lower() == "admin"


@dataclass(frozen=True)
class CallerIdentity:
    """Identity decoded from the bearer token of the current request."""

    id: str
    role: str = "user"
    email: str | None = None

    @property
    def identifiers(self) -> frozenset[str]:
        """Every lower-cased identifier that may address the caller."""

        values = {self.id.strip().lower()}
        if self.email:
            values.add(self.email.strip().lower())
        values.discard("")
        return frozenset(values)

    @property
    def sender(self) -> str:
        """Identifier recorded as the sender of outgoing messages."""

        return (self.email or self.id).strip().lower()

    @property
    def user_id(self) -> int | None:
        """Numeric user id when the token carries one."""

        try:
            return int(self.id)
        except (TypeError, ValueError):
            return None


__all__ = ["CallerIdentity", "User"]
