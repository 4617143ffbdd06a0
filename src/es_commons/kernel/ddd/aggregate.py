"""AggregateRoot – mutates state only by applying domain events."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Callable, TypeVar

from es_commons.kernel.ddd.domain_event import DomainEvent
from es_commons.kernel.ddd.entity import Entity, TId
from es_commons.kernel.ddd.event_recorder import EventRecorder
from es_commons.kernel.ddd.event_router import EventHandler, EventRouter
from es_commons.kernel.errors.domain import InvariantViolationError

E = TypeVar("E", bound=DomainEvent)


class AggregateRoot(Entity[TId]):
    """Event-applying aggregate root.

    Concrete aggregates keep their own state fields and change them only
    inside handlers registered with :meth:`_register`.  Command methods build
    an event and pass it to :meth:`_apply_event`; factories register every
    handler first and then apply the creation event through the same path.

    Lifecycle: *new* (every applied event still buffered), *dirty* (buffer
    non-empty), *clean* (buffer cleared after publication).  The version
    grows by exactly one per applied event and never decreases.

    Not thread-safe: callers serialise access to one instance.

    Example::

        class Counter(AggregateRoot[EntityId]):
            def __init__(self, id: EntityId) -> None:
                super().__init__(id)
                self.value = 0
                self._register(Incremented, self._on_incremented)

            @classmethod
            def create(cls, id: EntityId) -> "Counter":
                counter = cls(id)
                counter._apply_event(CounterCreated())
                return counter

            def increment(self) -> None:
                self._apply_event(Incremented(by=1))

            def _on_incremented(self, event: Incremented) -> None:
                self.value += event.by
    """

    def __init__(self, id: TId) -> None:  # noqa: A002
        super().__init__(id)
        self.__version = 0
        self.__router = EventRouter(owner=self.aggregate_name())
        self.__recorder = EventRecorder()

    # ------------------------------------------------------------------
    # Protected API for concrete aggregates
    # ------------------------------------------------------------------

    def _register(self, event_type: type[E] | str, handler: Callable[[E], None]) -> None:
        """Install the state handler for one event variant."""
        self.__router.register(event_type, handler)

    def _apply_event(self, event: E) -> E:
        """Stamp, route and record *event*; return the stamped copy.

        All or nothing: if the handler is missing, the handler raises, or
        :meth:`_check_invariants` raises, the version, the recorder and the
        aggregate's attributes are left as they were and the error propagates.
        """
        handler = self.__router.handler_for(event)
        stamped = event.stamped(self.__version + 1)
        self.__play(stamped, handler)
        self.__recorder.record(stamped)
        return stamped

    def _check_invariants(self) -> None:
        """Override to assert invariants after each applied event."""

    def _restore_version(self, version: int) -> None:
        """Set the version of an aggregate rehydrated from persisted state."""
        if version < 0:
            raise InvariantViolationError(f"Version must be >= 0, got {version}")
        if self.__recorder:
            raise InvariantViolationError(
                "Cannot restore the version of an aggregate with unpublished events"
            )
        self.__version = version

    # ------------------------------------------------------------------
    # Replay
    # ------------------------------------------------------------------

    def replay(self, events: Iterable[DomainEvent]) -> None:
        """Rebuild state from already-applied events, oldest first.

        Each event must carry the version that follows the aggregate's
        current one.  Replayed events are not recorded again, so replay is
        refused while the aggregate still has buffered events.
        """
        if self.__recorder:
            raise InvariantViolationError(
                "Cannot replay events onto an aggregate with unpublished events"
            )
        for event in events:
            expected = self.__version + 1
            if event.version != expected:
                raise InvariantViolationError(
                    f"Out-of-sequence event {event.event_type}: "
                    f"expected version {expected}, got {event.version}",
                    detail={"expected": expected, "actual": event.version},
                )
            self.__play(event, self.__router.handler_for(event))

    def __play(self, event: DomainEvent, handler: EventHandler) -> None:
        state = dict(self.__dict__)
        try:
            handler(event)
            self._check_invariants()
        except BaseException:
            self.__dict__.clear()
            self.__dict__.update(state)
            raise
        self.__version = event.version

    # ------------------------------------------------------------------
    # Publication contract
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        return self.__version

    def id_as_string(self) -> str:
        return str(self.id)

    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events applied since the last clear, in application order."""
        return self.__recorder.records()

    def clear_domain_events(self) -> None:
        """Drop buffered events; called by the publisher after a successful send."""
        self.__recorder.remove_all()

    def has_changes(self) -> bool:
        return bool(self.__recorder)

    def is_new(self) -> bool:
        """True while every applied event is still buffered."""
        return self.__version == len(self.__recorder)

    @classmethod
    def aggregate_name(cls) -> str:
        """Lower-cased class name; used by publishers to pick a destination."""
        return cls.__name__.lower()


__all__ = ["AggregateRoot"]
