"""EventRouter – maps event variant tags to state-mutating handlers."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from es_commons.kernel.ddd.domain_event import DomainEvent
from es_commons.kernel.errors.domain import NoHandlerRegisteredError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=DomainEvent)

#: A handler mutates the enclosing aggregate's state from one event.
EventHandler = Callable[[Any], None]


def event_type_of(event_or_type: DomainEvent | type[DomainEvent] | str) -> str:
    """Resolve the variant tag of an event instance, an event class or a raw tag."""
    if isinstance(event_or_type, str):
        return event_or_type
    return event_or_type.event_type


class EventRouter:
    """Per-aggregate dispatch table keyed by variant tag.

    Tags are resolved once, at registration; routing is a dictionary lookup.
    At most one handler exists per tag: registering a tag again replaces the
    previous handler.  There is no shared or module-level registry.

    Example::

        router = EventRouter(owner="product")
        router.register(ProductPriceChanged, self._on_price_changed)
        router.route(ProductPriceChanged(new_price=12.5))
    """

    def __init__(self, owner: str | None = None) -> None:
        self._owner = owner
        self._handlers: dict[str, EventHandler] = {}

    def register(
        self,
        event_type: type[E] | str,
        handler: Callable[[E], None],
    ) -> None:
        """Install *handler* for *event_type*, replacing any existing one."""
        tag = event_type_of(event_type)
        if tag in self._handlers:
            logger.debug("event_router.handler_replaced owner=%s event_type=%s", self._owner, tag)
        self._handlers[tag] = handler

    def handler_for(self, event_type: DomainEvent | type[DomainEvent] | str) -> EventHandler:
        """Return the handler for *event_type* or raise ``NoHandlerRegisteredError``."""
        tag = event_type_of(event_type)
        try:
            return self._handlers[tag]
        except KeyError:
            raise NoHandlerRegisteredError(tag, aggregate=self._owner) from None

    def route(self, event: DomainEvent) -> None:
        """Invoke the handler registered for *event*'s variant."""
        self.handler_for(event)(event)

    def handles(self, event_type: DomainEvent | type[DomainEvent] | str) -> bool:
        return event_type_of(event_type) in self._handlers

    def registered_types(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def __contains__(self, event_type: object) -> bool:
        if isinstance(event_type, (str, DomainEvent)):
            return self.handles(event_type)
        if isinstance(event_type, type) and issubclass(event_type, DomainEvent):
            return self.handles(event_type)
        return False

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["EventHandler", "EventRouter", "event_type_of"]
