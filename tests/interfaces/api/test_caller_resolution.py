"""Tests for turning bearer tokens into caller identities."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

pytest.importorskip("fastapi")

from fastapi import HTTPException  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402

from jobboard.infrastructure.repositories import UserRepository  # noqa: E402
from jobboard.interfaces.api.dependencies import resolve_caller  # noqa: E402


def test_email_claim_is_used_without_a_profile_lookup(token_for, monkeypatch):
    lookup = MagicMock()
    monkeypatch.setattr(UserRepository, "find_by_identifier", lookup)

    caller = resolve_caller(token_for(5, email="Rita@Acme.io"), MagicMock())

    assert caller.identifiers == {"5", "rita@acme.io"}
    lookup.assert_not_called()


def test_profile_email_widens_the_identifiers(token_for, session, create_profile):
    profile = create_profile("rita@acme.io")

    caller = resolve_caller(token_for(profile.id, role="admin"), session)

    assert caller.email == "rita@acme.io"
    assert caller.role == "admin"


def test_failed_profile_lookup_rolls_back_the_session(token_for, monkeypatch):
    def _broken(self, identifier):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(UserRepository, "find_by_identifier", _broken)
    db = MagicMock()

    caller = resolve_caller(token_for(5), db)

    assert caller.email is None
    assert caller.sender == "5"
    db.rollback.assert_called_once()


@pytest.mark.parametrize("token", [None, "", "garbage"])
def test_missing_or_invalid_tokens_are_rejected(token):
    with pytest.raises(HTTPException) as excinfo:
        resolve_caller(token, MagicMock())

    assert excinfo.value.status_code == 401
