"""Kernel messaging – message primitives and bus ports."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar
from uuid import uuid4

T = TypeVar("T")

type MessageId = str


@dataclasses.dataclass(frozen=True)
class MessageHeaders:
    """Envelope metadata propagated with every message."""

    correlation_id: str | None = None
    event_type: str | None = None
    aggregate: str | None = None
    aggregate_version: int | None = None
    content_type: str = "application/json"
    extra: dict[str, str] = dataclasses.field(default_factory=dict)

    def as_pairs(self) -> list[tuple[str, str]]:
        """Flatten to ``(name, value)`` pairs, skipping unset headers."""
        pairs = [(k, v) for k, v in self.extra.items()]
        if self.correlation_id:
            pairs.append(("correlation-id", self.correlation_id))
        if self.event_type:
            pairs.append(("event-type", self.event_type))
        if self.aggregate:
            pairs.append(("aggregate", self.aggregate))
        if self.aggregate_version is not None:
            pairs.append(("aggregate-version", str(self.aggregate_version)))
        pairs.append(("content-type", self.content_type))
        return pairs


@dataclasses.dataclass(frozen=True)
class Message(Generic[T]):
    """Transport-agnostic message envelope.

    ``key`` selects the partition on transports that support it; messages
    sharing a key keep their relative order.
    """

    id: MessageId = dataclasses.field(default_factory=lambda: str(uuid4()))
    topic: str = ""
    key: str | None = None
    payload: T | None = None
    headers: MessageHeaders = dataclasses.field(default_factory=MessageHeaders)
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))


class MessageSerializer(abc.ABC, Generic[T]):
    """Port: serialize / deserialize message payloads."""

    @abc.abstractmethod
    def serialize(self, payload: T) -> bytes: ...

    @abc.abstractmethod
    def deserialize(self, data: bytes, target_type: type[T]) -> T: ...


class MessageBus(abc.ABC):
    """Port: publish messages to a transport (Kafka, in-memory, …)."""

    @abc.abstractmethod
    async def publish(self, message: Message[Any]) -> None: ...

    @abc.abstractmethod
    async def publish_batch(self, messages: list[Message[Any]]) -> None: ...


__all__ = [
    "Message",
    "MessageBus",
    "MessageHeaders",
    "MessageId",
    "MessageSerializer",
]
