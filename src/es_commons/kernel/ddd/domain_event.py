"""Domain events – immutable facts with a stable variant tag."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any, ClassVar, Self
from uuid import uuid4

from es_commons.kernel.errors.domain import InvariantViolationError

_BASE_FIELDS = frozenset({"event_id", "occurred_at", "version"})


@dataclasses.dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    Subclasses are frozen dataclasses carrying only the data needed to replay
    their state transition.  The variant tag (``event_type``) is fixed when
    the subclass is created: it defaults to the class name and can be pinned
    explicitly so renaming the class does not change what goes on the wire.

    ``version`` is write-once.  It is ``0`` at construction and only the
    owning aggregate sets it, through :meth:`stamped`, when the event is
    applied.

    Example::

        @dataclasses.dataclass(frozen=True)
        class OrderPlaced(DomainEvent, event_type="order.placed"):
            order_id: str
            total: float

            def validate(self) -> None:
                if self.total < 0:
                    raise InvalidEventPayloadError(self.event_type, "total must be >= 0")
    """

    event_type: ClassVar[str] = "DomainEvent"

    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()), kw_only=True)
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC), kw_only=True
    )
    version: int = dataclasses.field(default=0, kw_only=True)

    def __init_subclass__(cls, *, event_type: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.event_type = event_type or cls.__name__

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Override to reject domain-invalid payloads with ``InvalidEventPayloadError``."""

    @property
    def is_stamped(self) -> bool:
        return self.version > 0

    def stamped(self, version: int) -> Self:
        """Return a copy of this event carrying *version*.

        Raises ``InvariantViolationError`` if the event was already stamped or
        *version* is not a positive integer.
        """
        if self.is_stamped:
            raise InvariantViolationError(
                f"{self.event_type} {self.event_id} is already stamped with version {self.version}"
            )
        if version < 1:
            raise InvariantViolationError(f"Event version must be >= 1, got {version}")
        return dataclasses.replace(self, version=version)

    def payload(self) -> dict[str, Any]:
        """Variant-specific fields only (no id, timestamp or version)."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name not in _BASE_FIELDS
        }


__all__ = ["DomainEvent"]
