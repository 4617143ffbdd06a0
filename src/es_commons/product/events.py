"""Product domain events."""

from __future__ import annotations

import dataclasses
import math

from es_commons.kernel.ddd import DomainEvent
from es_commons.kernel.errors import InvalidEventPayloadError


def _check_name(event_type: str, name: str) -> None:
    if not name or not name.strip():
        raise InvalidEventPayloadError(event_type, "name must not be empty")


def _check_price(event_type: str, price: float) -> None:
    if math.isnan(price) or math.isinf(price) or price < 0:
        raise InvalidEventPayloadError(event_type, f"price must be a finite value >= 0, got {price}")


@dataclasses.dataclass(frozen=True)
class ProductCreatedEvent(DomainEvent):
    name: str
    price: float
    category_id: int = 0

    def validate(self) -> None:
        _check_name(self.event_type, self.name)
        _check_price(self.event_type, self.price)


@dataclasses.dataclass(frozen=True)
class ProductNameChangedEvent(DomainEvent):
    new_name: str

    def validate(self) -> None:
        _check_name(self.event_type, self.new_name)


@dataclasses.dataclass(frozen=True)
class ProductPriceChangedEvent(DomainEvent):
    new_price: float

    def validate(self) -> None:
        _check_price(self.event_type, self.new_price)


__all__ = [
    "ProductCreatedEvent",
    "ProductNameChangedEvent",
    "ProductPriceChangedEvent",
]
