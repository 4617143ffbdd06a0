"""Product – example event-applying aggregate."""

from es_commons.product.aggregate import Product
from es_commons.product.events import (
    ProductCreatedEvent,
    ProductNameChangedEvent,
    ProductPriceChangedEvent,
)

__all__ = [
    "Product",
    "ProductCreatedEvent",
    "ProductNameChangedEvent",
    "ProductPriceChangedEvent",
]
