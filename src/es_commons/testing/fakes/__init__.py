"""Testing fakes – in-memory doubles for kernel ports."""
from es_commons.testing.fakes.message_bus import InMemoryMessageBus
from es_commons.testing.fakes.repository import InMemoryAggregateRepository

__all__ = [
    "InMemoryAggregateRepository",
    "InMemoryMessageBus",
]
