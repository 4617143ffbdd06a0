"""Unit tests for in-memory test fakes and aggregate assertions."""

from __future__ import annotations

import asyncio

import pytest

from es_commons.application.publishing import AggregateEventPublisher, TopicResolver
from es_commons.kernel.errors import ConflictError, NotFoundError, PublicationError
from es_commons.kernel.messaging import Message, MessageHeaders
from es_commons.product import (
    Product,
    ProductCreatedEvent,
    ProductNameChangedEvent,
    ProductPriceChangedEvent,
)
from es_commons.testing import (
    AggregateRootAssertion,
    InMemoryAggregateRepository,
    InMemoryMessageBus,
    assert_events,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _message(topic: str = "catalog.product", event_type: str = "ProductCreatedEvent") -> Message:
    return Message(
        topic=topic,
        key="p-1",
        payload={"x": 1},
        headers=MessageHeaders(event_type=event_type),
    )


def _publisher(bus: InMemoryMessageBus) -> AggregateEventPublisher:
    return AggregateEventPublisher(bus, TopicResolver(prefix="catalog"))


# ---------------------------------------------------------------------------
# InMemoryMessageBus
# ---------------------------------------------------------------------------


class TestInMemoryMessageBus:
    def test_publish_records_in_order(self) -> None:
        bus = InMemoryMessageBus()
        first, second = _message(), _message(event_type="ProductPriceChangedEvent")
        asyncio.run(bus.publish(first))
        asyncio.run(bus.publish(second))
        assert bus.published == [first, second]
        assert bus.event_types() == ["ProductCreatedEvent", "ProductPriceChangedEvent"]

    def test_published_is_a_copy(self) -> None:
        bus = InMemoryMessageBus()
        asyncio.run(bus.publish(_message()))
        bus.published.clear()
        assert len(bus.published) == 1

    def test_publish_batch(self) -> None:
        bus = InMemoryMessageBus()
        asyncio.run(bus.publish_batch([_message(), _message()]))
        assert len(bus.published) == 2

    def test_of_topic(self) -> None:
        bus = InMemoryMessageBus()
        asyncio.run(bus.publish(_message("a")))
        asyncio.run(bus.publish(_message("b")))
        assert [m.topic for m in bus.of_topic("b")] == ["b"]

    def test_clear(self) -> None:
        bus = InMemoryMessageBus()
        asyncio.run(bus.publish(_message()))
        bus.clear()
        assert bus.published == []

    def test_fail_after(self) -> None:
        bus = InMemoryMessageBus(fail_after=1)
        asyncio.run(bus.publish(_message()))
        with pytest.raises(ConnectionError):
            asyncio.run(bus.publish(_message()))
        assert len(bus.published) == 1

    def test_fail_after_zero_refuses_everything(self) -> None:
        bus = InMemoryMessageBus(fail_after=0)
        with pytest.raises(ConnectionError):
            asyncio.run(bus.publish(_message()))


# ---------------------------------------------------------------------------
# InMemoryAggregateRepository
# ---------------------------------------------------------------------------


class TestInMemoryAggregateRepository:
    def test_save_and_get_new_aggregate(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        product = Product.create("Widget", 10.0)
        asyncio.run(repo.save(product))
        loaded = asyncio.run(repo.get(product.id))
        assert loaded == product
        assert loaded is not product
        assert loaded.version == 1
        assert loaded.name == "Widget"
        assert loaded.has_changes() is False
        assert repo.stored_version(product.id) == 1
        assert len(repo) == 1

    def test_without_publisher_events_stay_buffered(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        product = Product.create("Widget", 10.0)
        asyncio.run(repo.save(product))
        assert product.has_changes() is True

    def test_get_missing_returns_none(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        assert asyncio.run(repo.get("missing")) is None

    def test_get_or_raise_missing(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        with pytest.raises(NotFoundError):
            asyncio.run(repo.get_or_raise("missing"))

    def test_loaded_copy_accepts_commands(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        product = Product.create("Widget", 10.0)
        product.clear_domain_events()
        asyncio.run(repo.save(product))

        loaded = asyncio.run(repo.get_or_raise(product.id))
        loaded.change_price(12.5)
        assert loaded.version == 2
        assert loaded.price == 12.5
        assert product.price == 10.0
        asyncio.run(repo.save(loaded))
        assert repo.stored_version(product.id) == 2

    def test_concurrent_modification_conflicts(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        product = Product.create("Widget", 10.0)
        product.clear_domain_events()
        asyncio.run(repo.save(product))

        first = asyncio.run(repo.get_or_raise(product.id))
        second = asyncio.run(repo.get_or_raise(product.id))
        first.change_price(11.0)
        second.change_name("Gadget")
        asyncio.run(repo.save(first))
        with pytest.raises(ConflictError) as exc_info:
            asyncio.run(repo.save(second))
        assert exc_info.value.detail == {"expected_version": 1, "stored_version": 2}
        assert asyncio.run(repo.get_or_raise(product.id)).name == "Widget"

    def test_saving_a_new_aggregate_twice_conflicts(self) -> None:
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository()
        asyncio.run(repo.save(Product.create("Widget", 10.0)))
        with pytest.raises(ConflictError):
            asyncio.run(repo.save(Product.create("Widget", 99.0)))

    def test_publisher_publishes_and_clears(self) -> None:
        bus = InMemoryMessageBus()
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository(_publisher(bus))
        product = Product.create("Widget", 10.0)
        product.change_price(12.5)
        asyncio.run(repo.save(product))
        assert bus.event_types() == ["ProductCreatedEvent", "ProductPriceChangedEvent"]
        assert product.has_changes() is False
        assert product.version == 2

    def test_publisher_failure_keeps_events_and_allows_retry(self) -> None:
        bus = InMemoryMessageBus(fail_after=0)
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository(_publisher(bus))
        product = Product.create("Widget", 10.0)
        with pytest.raises(PublicationError):
            asyncio.run(repo.save(product))
        assert product.has_changes() is True
        assert asyncio.run(repo.get(product.id)) is None
        assert repo.stored_version(product.id) == 0
        assert len(repo) == 0

        bus.fail_after = None
        asyncio.run(repo.save(product))
        assert product.has_changes() is False
        assert repo.stored_version(product.id) == 1
        assert bus.event_types() == ["ProductCreatedEvent"]

    def test_publisher_failure_restores_previous_version(self) -> None:
        bus = InMemoryMessageBus()
        repo: InMemoryAggregateRepository[Product] = InMemoryAggregateRepository(_publisher(bus))
        product = Product.create("Widget", 10.0)
        asyncio.run(repo.save(product))

        product.change_price(12.5)
        bus.fail_after = 1
        with pytest.raises(PublicationError):
            asyncio.run(repo.save(product))
        assert repo.stored_version(product.id) == 1
        assert asyncio.run(repo.get_or_raise(product.id)).price == 10.0

        bus.fail_after = None
        asyncio.run(repo.save(product))
        assert repo.stored_version(product.id) == 2
        assert asyncio.run(repo.get_or_raise(product.id)).price == 12.5

    def test_fixture_wiring(self, aggregate_repository, fake_message_bus) -> None:
        product = Product.create("Widget", 10.0)
        asyncio.run(aggregate_repository.save(product))
        assert [m.topic for m in fake_message_bus.published] == ["test.events.product"]
        assert product.has_changes() is False


# ---------------------------------------------------------------------------
# AggregateRootAssertion
# ---------------------------------------------------------------------------


class TestAggregateRootAssertion:
    def _product(self) -> Product:
        product = Product.create("Widget", 10.0)
        product.change_price(12.5)
        return product

    def test_chained_assertions_pass(self) -> None:
        result = (
            assert_events(self._product())
            .should_have_count(2)
            .should_contain(ProductCreatedEvent)
            .should_contain(ProductPriceChangedEvent, lambda e: e.new_price == 12.5)
            .should_not_contain(ProductNameChangedEvent)
        )
        assert isinstance(result, AggregateRootAssertion)

    def test_context_manager(self) -> None:
        with assert_events(self._product()) as events:
            events.should_have_count(2)

    def test_wrong_count(self) -> None:
        with pytest.raises(AssertionError, match="Expected 3 domain events but found 2"):
            assert_events(self._product()).should_have_count(3)

    def test_missing_event_type(self) -> None:
        with pytest.raises(AssertionError, match="ProductNameChangedEvent"):
            assert_events(self._product()).should_contain(ProductNameChangedEvent)

    def test_check_failure(self) -> None:
        with pytest.raises(AssertionError, match="did not match"):
            assert_events(self._product()).should_contain(
                ProductPriceChangedEvent, lambda e: e.new_price == 99.0
            )

    def test_unexpected_event_type(self) -> None:
        with pytest.raises(AssertionError, match="not to contain ProductCreatedEvent"):
            assert_events(self._product()).should_not_contain(ProductCreatedEvent)

    def test_cleared_aggregate_has_no_events(self) -> None:
        product = self._product()
        product.clear_domain_events()
        assert_events(product).should_have_count(0).should_not_contain(ProductCreatedEvent)
