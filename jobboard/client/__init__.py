"""Polling client used by the web UI and scripts."""

from .api import MessagingAPIClient
from .poller import Poller
from .preferences import RecipientPreference, RecipientPreferenceStore
from .session import MessagingSession

__all__ = [
    "MessagingAPIClient",
    "MessagingSession",
    "Poller",
    "RecipientPreference",
    "RecipientPreferenceStore",
]
