"""Application publishing – AggregateEventPublisher."""

from __future__ import annotations

from typing import Any

from es_commons.application.publishing.serializer import DomainEventSerializer
from es_commons.application.publishing.topic import TopicResolver
from es_commons.kernel.ddd import AggregateRoot, DomainEvent
from es_commons.kernel.errors import PublicationError
from es_commons.kernel.messaging import Message, MessageBus, MessageHeaders
from es_commons.observability.logging import aggregate_context, get_logger


class AggregateEventPublisher:
    """Publish an aggregate's buffered events to a :class:`MessageBus`.

    One message per event, in recorder order, on the topic resolved from
    ``aggregate_name()`` and keyed by the aggregate id, so a partitioned
    transport keeps one aggregate's events in order.

    :meth:`publish_for` never clears the aggregate.  Use
    :meth:`publish_and_clear` (or call ``clear_domain_events()`` yourself) to
    move the aggregate to the clean state once every send succeeded.

    Sending stops at the first failure, which is raised as
    ``PublicationError``; events sent before it are not recalled and the
    aggregate keeps all of its buffered events.
    """

    def __init__(
        self,
        bus: MessageBus,
        topic_resolver: TopicResolver,
        serializer: DomainEventSerializer | None = None,
        correlation_id: str | None = None,
    ) -> None:
        self._bus = bus
        self._resolver = topic_resolver
        self._serializer = serializer or DomainEventSerializer()
        self._correlation_id = correlation_id
        self._log = get_logger(__name__)

    def to_messages(self, aggregate: AggregateRoot[Any]) -> list[Message[dict[str, Any]]]:
        """Build the messages for every buffered event of *aggregate*."""
        events = aggregate.domain_events()
        if not events:
            return []
        topic = self._resolver.resolve(aggregate.aggregate_name())
        return [self._to_message(aggregate, topic.name, event) for event in events]

    def _to_message(
        self,
        aggregate: AggregateRoot[Any],
        topic: str,
        event: DomainEvent,
    ) -> Message[dict[str, Any]]:
        return Message(
            id=event.event_id,
            topic=topic,
            key=aggregate.id_as_string(),
            payload=self._serializer.to_document(event),
            headers=MessageHeaders(
                correlation_id=self._correlation_id,
                event_type=event.event_type,
                aggregate=aggregate.aggregate_name(),
                aggregate_version=event.version,
            ),
            occurred_at=event.occurred_at,
        )

    async def publish_for(self, aggregate: AggregateRoot[Any]) -> int:
        """Send every buffered event of *aggregate*; return the number sent."""
        log = self._log.bind(**aggregate_context(aggregate))
        messages = self.to_messages(aggregate)
        if not messages:
            log.debug("events.nothing_to_publish")
            return 0

        sent = 0
        for message in messages:
            try:
                await self._bus.publish(message)
            except Exception as exc:
                log.error(
                    "events.publish_failed",
                    topic=message.topic,
                    event_type=message.headers.event_type,
                    published=sent,
                    error=repr(exc),
                )
                raise PublicationError(
                    f"Failed to publish {message.headers.event_type} to {message.topic!r}",
                    topic=message.topic,
                    published=sent,
                    cause=exc,
                ) from exc
            sent += 1
            log.info(
                "events.published",
                topic=message.topic,
                event_type=message.headers.event_type,
                event_version=message.headers.aggregate_version,
            )
        return sent

    async def publish_and_clear(self, aggregate: AggregateRoot[Any]) -> int:
        """Publish, then clear the aggregate's buffer if every send succeeded."""
        sent = await self.publish_for(aggregate)
        aggregate.clear_domain_events()
        return sent


__all__ = ["AggregateEventPublisher"]
