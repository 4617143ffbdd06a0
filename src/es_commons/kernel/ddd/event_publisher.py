"""EventPublisher port – ships an aggregate's buffered events to a transport."""

from __future__ import annotations

from typing import Any, Protocol

from es_commons.kernel.ddd.aggregate import AggregateRoot


class EventPublisher(Protocol):
    """Port: publish the buffered domain events of one aggregate.

    Implementations read ``aggregate.domain_events()`` in order, map
    ``aggregate.aggregate_name()`` to a destination and send each event.
    Publishing never clears the aggregate: the caller (or an explicit
    publish-and-clear helper) calls ``clear_domain_events()`` once every send
    has succeeded.  Delivery guarantees are the implementation's concern.

    Example::

        class LoggingPublisher:
            async def publish_for(self, aggregate: AggregateRoot[Any]) -> int:
                for event in aggregate.domain_events():
                    log.info("event", type=event.event_type)
                return len(aggregate.domain_events())
    """

    async def publish_for(self, aggregate: AggregateRoot[Any]) -> int:
        """Send every buffered event of *aggregate*; return how many were sent."""
        ...


__all__ = ["EventPublisher"]
