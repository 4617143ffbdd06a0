"""Testing support – fakes, assertions, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["es_commons.testing.fixtures"]
"""

from es_commons.testing.assertions import AggregateRootAssertion, assert_events
from es_commons.testing.fakes import InMemoryAggregateRepository, InMemoryMessageBus

__all__ = [
    "AggregateRootAssertion",
    "InMemoryAggregateRepository",
    "InMemoryMessageBus",
    "assert_events",
]
