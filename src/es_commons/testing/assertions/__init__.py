"""Testing assertions – aggregate event assertions."""
from es_commons.testing.assertions.aggregate import AggregateRootAssertion, assert_events

__all__ = ["AggregateRootAssertion", "assert_events"]
