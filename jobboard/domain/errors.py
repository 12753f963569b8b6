"""Exceptions raised by the messaging and notification use cases."""

from __future__ import annotations


class MessagingError(Exception):
    """Base class for errors surfaced by the messaging subsystem."""


class ValidationError(MessagingError, ValueError):
    """Required fields are missing or malformed."""


class NotFoundError(MessagingError, LookupError):
    """The referenced entity does not exist or belongs to another user."""


class ForbiddenError(MessagingError):
    """The caller is not a participant of the requested conversation."""


class TransientUpstreamError(MessagingError):
    """The database could not be reached for this request."""


__all__ = [
    "MessagingError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "TransientUpstreamError",
]
