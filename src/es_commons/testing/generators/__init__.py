"""Testing generators – Hypothesis strategies for aggregates and events."""
from es_commons.testing.generators.strategies import (
    ProductCommand,
    apply_commands,
    entity_id_strategy,
    price_strategy,
    product_command_strategy,
    product_name_strategy,
)

__all__ = [
    "ProductCommand",
    "apply_commands",
    "entity_id_strategy",
    "price_strategy",
    "product_command_strategy",
    "product_name_strategy",
]
