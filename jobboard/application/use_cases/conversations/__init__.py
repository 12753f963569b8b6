"""Use cases for the derived conversation view."""

from .enrichment import PeerDisplay, describe_peer, generated_avatar_url
from .list_conversations import list_conversations

__all__ = [
    "PeerDisplay",
    "describe_peer",
    "generated_avatar_url",
    "list_conversations",
]
