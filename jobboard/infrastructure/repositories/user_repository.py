"""Read access to user profiles for conversation display."""

from __future__ import annotations

import re

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.domain.entities import User
from jobboard.infrastructure.models import UserModel
from jobboard.utils import ensure_app_naive_datetime, ensure_app_timezone

from .errors import upstream_guard

_USER_ID_PATTERN = re.compile(r"^\d+$")


class UserRepository:
    """Look up :class:`User` profiles by id or email."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        with upstream_guard(self.session, "load a user"):
            model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        normalized = (email or "").strip().lower()
        if not normalized:
            return None
        query = self.session.query(UserModel).filter(
            func.lower(UserModel.email) == normalized
        )
        with upstream_guard(self.session, "load a user by email"):
            model = query.first()
        return self._to_entity(model) if model else None

    def find_by_identifier(self, identifier: str) -> User | None:
        """Resolve a participant identifier by email, then by numeric id."""

        normalized = (identifier or "").strip().lower()
        user = self.get_by_email(normalized)
        if user is None and _USER_ID_PATTERN.match(normalized):
            user = self.get(int(normalized))
        return user

    def create(self, user: User) -> User:
        model = UserModel(
            email=user.email.strip().lower(),
            role=user.role,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
        )
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        with upstream_guard(self.session, "create a user"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            role=model.role,
            full_name=model.full_name,
            avatar_url=model.avatar_url,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
