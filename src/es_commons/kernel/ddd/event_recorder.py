"""EventRecorder – ordered buffer of events not yet published."""

from __future__ import annotations

from collections.abc import Iterator

from es_commons.kernel.ddd.domain_event import DomainEvent


class EventRecorder:
    """Append-only, insertion-ordered buffer owned by one aggregate.

    Insertion order is publish order.  Besides :meth:`record` the only
    mutation is :meth:`remove_all`, which the publication path calls after a
    successful send; the aggregate never clears it on its own.
    """

    def __init__(self) -> None:
        self._records: list[DomainEvent] = []

    def record(self, event: DomainEvent) -> None:
        """Append *event* to the tail of the buffer."""
        if event is None:
            raise TypeError("EventRecorder.record() requires an event, got None")
        self._records.append(event)

    def records(self) -> tuple[DomainEvent, ...]:
        """Return the buffered events, oldest first."""
        return tuple(self._records)

    def remove_all(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DomainEvent]:
        return iter(tuple(self._records))

    def __bool__(self) -> bool:
        return bool(self._records)


__all__ = ["EventRecorder"]
