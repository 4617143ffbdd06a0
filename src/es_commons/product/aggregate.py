"""Product aggregate."""

from __future__ import annotations

from collections.abc import Iterable

from es_commons.kernel.ddd import AggregateRoot, DomainEvent
from es_commons.kernel.types import EntityId
from es_commons.product.events import (
    ProductCreatedEvent,
    ProductNameChangedEvent,
    ProductPriceChangedEvent,
)


class Product(AggregateRoot[EntityId]):
    """A catalogue product whose name and price change only through events.

    Use the factories; the constructor only builds the zero state.

    Example::

        product = Product.create("Widget", 10.0, category_id=3)
        product.change_price(12.5)
        [e.event_type for e in product.domain_events()]
        # ["ProductCreatedEvent", "ProductPriceChangedEvent"]
    """

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        super().__init__(id)
        self.name: str = ""
        self.price: float = 0.0
        self.category_id: int = 0
        self._register(ProductCreatedEvent, self._on_created)
        self._register(ProductNameChangedEvent, self._on_name_changed)
        self._register(ProductPriceChangedEvent, self._on_price_changed)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, name: str, price: float, category_id: int = 0) -> "Product":
        """Create a new product; its id is derived from *name*."""
        event = ProductCreatedEvent(name=name, price=price, category_id=category_id)
        product = cls(EntityId.from_name(name))
        product._apply_event(event)
        return product

    @classmethod
    def from_persistence(
        cls,
        id: EntityId | str,  # noqa: A002
        name: str,
        price: float,
        category_id: int,
        version: int,
    ) -> "Product":
        """Rehydrate a stored product; the result has no buffered events."""
        product = cls(id if isinstance(id, EntityId) else EntityId(id))
        product.name = name
        product.price = price
        product.category_id = category_id
        product._restore_version(version)
        return product

    @classmethod
    def from_history(cls, id: EntityId, events: Iterable[DomainEvent]) -> "Product":  # noqa: A002
        """Rebuild a product by replaying its events."""
        product = cls(id)
        product.replay(events)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def change_price(self, new_price: float) -> None:
        self._apply_event(ProductPriceChangedEvent(new_price=new_price))

    def change_name(self, new_name: str) -> None:
        self._apply_event(ProductNameChangedEvent(new_name=new_name))

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_created(self, event: ProductCreatedEvent) -> None:
        self.name = event.name
        self.price = event.price
        self.category_id = event.category_id

    def _on_name_changed(self, event: ProductNameChangedEvent) -> None:
        self.name = event.new_name

    def _on_price_changed(self, event: ProductPriceChangedEvent) -> None:
        self.price = event.new_price


__all__ = ["Product"]
