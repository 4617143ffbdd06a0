"""Kernel messaging – message envelope and transport ports."""
from es_commons.kernel.messaging.message import (
    Message,
    MessageBus,
    MessageHeaders,
    MessageId,
    MessageSerializer,
)

__all__ = [
    "Message",
    "MessageBus",
    "MessageHeaders",
    "MessageId",
    "MessageSerializer",
]
