"""Kafka adapter – KafkaMessageSerializer."""
from __future__ import annotations

import json
from typing import Any

from es_commons.kernel.errors import SerializationError
from es_commons.kernel.messaging import MessageSerializer


class KafkaMessageSerializer(MessageSerializer[Any]):
    """JSON serialiser/deserialiser for Kafka record values."""

    def serialize(self, payload: Any) -> bytes:
        if isinstance(payload, bytes):
            return payload
        try:
            return json.dumps(payload, default=str).encode()
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot encode Kafka payload: {exc}",
                payload_type=type(payload).__name__,
                cause=exc,
            ) from exc

    def deserialize(self, data: bytes, target_type: type[Any]) -> Any:
        parsed = json.loads(data)
        if target_type is dict or target_type is Any:
            return parsed
        return target_type(**parsed)


__all__ = ["KafkaMessageSerializer"]
