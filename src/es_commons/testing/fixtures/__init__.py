"""Testing fixtures – pytest fixtures for fake doubles.

Enable in your ``conftest.py``::

    pytest_plugins = ["es_commons.testing.fixtures"]
"""
from es_commons.testing.fixtures.message_bus import (
    TEST_TOPIC_PREFIX,
    aggregate_repository,
    event_publisher,
    fake_message_bus,
    topic_resolver,
)

__all__ = [
    "TEST_TOPIC_PREFIX",
    "aggregate_repository",
    "event_publisher",
    "fake_message_bus",
    "topic_resolver",
]
