"""Application publishing – DomainEventSerializer."""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from typing import Any, TypeVar

from es_commons.kernel.ddd.domain_event import DomainEvent
from es_commons.kernel.errors import BaseError, SerializationError
from es_commons.kernel.messaging import MessageSerializer

E = TypeVar("E", bound=DomainEvent)


class DomainEventSerializer(MessageSerializer[DomainEvent]):
    """Encode domain events as self-describing JSON documents.

    Document layout::

        {
            "event_type": "ProductPriceChangedEvent",
            "event_id": "…",
            "occurred_at": "2024-01-01T00:00:00+00:00",
            "version": 2,
            "payload": {"new_price": 12.5}
        }

    The ``event_type`` tag is checked on decode, so a document can only be
    turned back into the variant that produced it.
    """

    def to_document(self, event: DomainEvent) -> dict[str, Any]:
        return {
            "event_type": event.event_type,
            "event_id": event.event_id,
            "occurred_at": event.occurred_at.isoformat(),
            "version": event.version,
            "payload": event.payload(),
        }

    def serialize(self, payload: DomainEvent) -> bytes:
        try:
            return json.dumps(self.to_document(payload), default=str).encode()
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot serialize {payload.event_type}: {exc}",
                payload_type=payload.event_type,
                cause=exc,
            ) from exc

    def deserialize(self, data: bytes, target_type: type[E]) -> E:  # type: ignore[override]
        try:
            document = json.loads(data)
        except ValueError as exc:
            raise SerializationError(
                f"Invalid event document: {exc}", payload_type=target_type.event_type, cause=exc
            ) from exc
        return self.from_document(document, target_type)

    def from_document(self, document: dict[str, Any], target_type: type[E]) -> E:
        if not isinstance(document, dict):
            raise SerializationError(
                f"Event document must be a JSON object, got {type(document).__name__}",
                payload_type=target_type.event_type,
            )
        tag = document.get("event_type")
        if tag != target_type.event_type:
            raise SerializationError(
                f"Document of type {tag!r} cannot be decoded as {target_type.event_type!r}",
                payload_type=target_type.event_type,
            )
        fields = document.get("payload", {})
        if not isinstance(fields, dict):
            raise SerializationError(
                f"{target_type.event_type} payload must be a JSON object, "
                f"got {type(fields).__name__}",
                payload_type=target_type.event_type,
            )
        names = {f.name for f in dataclasses.fields(target_type)}
        payload = {k: v for k, v in fields.items() if k in names}
        try:
            return target_type(
                **payload,
                event_id=document["event_id"],
                occurred_at=datetime.fromisoformat(document["occurred_at"]),
                version=int(document.get("version", 0)),
            )
        except BaseError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(
                f"Malformed {target_type.event_type} document: {exc}",
                payload_type=target_type.event_type,
                cause=exc,
            ) from exc


__all__ = ["DomainEventSerializer"]
