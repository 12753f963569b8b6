"""Tests for conversation id derivation and participant helpers."""

import pytest

from jobboard.domain.conversation import (
    derive_conversation_id,
    normalize_participants,
    other_participant,
)


@pytest.mark.parametrize(
    ("first", "second"),
    [
        ("alice@x.com", "bob@x.com"),
        ("Bob@X.com", "alice@x.com"),
        ("42", "recruiter@acme.io"),
        ("zed", "Abe"),
    ],
)
def test_derivation_is_commutative(first, second):
    assert derive_conversation_id(first, second) == derive_conversation_id(second, first)


def test_identifiers_are_lowercased_sorted_and_joined():
    assert derive_conversation_id("Bob@X.com", " alice@x.com ") == "alice@x.com__bob@x.com"


@pytest.mark.parametrize(("first", "second"), [("", "bob@x.com"), ("alice@x.com", "   "), (None, "bob")])
def test_empty_identifier_yields_no_id(first, second):
    assert derive_conversation_id(first, second) is None


def test_self_conversation_is_derivable():
    assert derive_conversation_id("me@x.com", "ME@x.com") == "me@x.com__me@x.com"


def test_normalize_participants_dedupes_case_insensitively():
    assert normalize_participants(["Bob@x.com", "alice@x.com", "bob@x.com", ""]) == [
        "alice@x.com",
        "bob@x.com",
    ]


def test_other_participant_skips_every_caller_identifier():
    participants = ["7", "alice@x.com", "bob@x.com"]
    assert other_participant(participants, {"7", "ALICE@x.com"}) == "bob@x.com"
    assert other_participant(["7"], {"7"}) is None
