"""Realtime push helpers for the infrastructure layer."""

from .manager import RealtimeConnectionManager, realtime_manager
from .publisher import (
    RealtimePublisher,
    dispatch_message,
    dispatch_notification,
    realtime_publisher,
    serialize_message,
    serialize_notification,
)

__all__ = [
    "RealtimeConnectionManager",
    "realtime_manager",
    "RealtimePublisher",
    "realtime_publisher",
    "dispatch_message",
    "dispatch_notification",
    "serialize_message",
    "serialize_notification",
]
