"""Kafka adapter – KafkaProducer."""
from __future__ import annotations

import logging
from typing import Any

from es_commons.adapters.kafka.serializer import KafkaMessageSerializer
from es_commons.config.settings import PublisherSettings
from es_commons.kernel.messaging import Message, MessageBus, MessageSerializer

logger = logging.getLogger(__name__)


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'es-commons[kafka]' to use the Kafka adapter") from exc


class KafkaProducer(MessageBus):
    """aiokafka-backed producer implementing ``MessageBus``.

    Each ``send`` is awaited to acknowledgement before the next one is
    issued, so a failure surfaces on the message that caused it and the
    messages after it are never sent.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        serializer: MessageSerializer[Any] | None = None,
        **producer_kwargs: Any,
    ) -> None:
        aiokafka = _require_aiokafka()
        self._producer = aiokafka.AIOKafkaProducer(bootstrap_servers=bootstrap_servers, **producer_kwargs)
        self._serializer = serializer or KafkaMessageSerializer()
        self._started = False

    @classmethod
    def from_settings(cls, settings: PublisherSettings, **producer_kwargs: Any) -> "KafkaProducer":
        return cls(settings.bootstrap_servers, client_id=settings.client_id, **producer_kwargs)

    async def start(self) -> None:
        await self._producer.start()
        self._started = True

    async def stop(self) -> None:
        await self._producer.stop()
        self._started = False

    async def __aenter__(self) -> "KafkaProducer":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def publish(self, message: Message[Any]) -> None:
        if not self._started:
            await self.start()
        headers = [(k, v.encode()) for k, v in message.headers.as_pairs()]
        await self._producer.send_and_wait(
            topic=message.topic,
            value=self._serializer.serialize(message.payload),
            key=(message.key or message.id).encode(),
            headers=headers,
        )
        logger.debug("kafka.published topic=%s id=%s key=%s", message.topic, message.id, message.key)

    async def publish_batch(self, messages: list[Message[Any]]) -> None:
        for msg in messages:
            await self.publish(msg)


__all__ = ["KafkaProducer"]
