"""Application publishing – Topic and TopicResolver."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping

from es_commons.config.settings import PublisherSettings
from es_commons.kernel.errors import NotFoundError


@dataclasses.dataclass(frozen=True)
class Topic:
    """A publication destination."""

    name: str


class TopicResolver:
    """Map an aggregate name to the topic its events are published to.

    Explicit entries win; otherwise, when a *prefix* is configured, the topic
    is ``"<prefix>.<aggregate_name>"``.  An aggregate with neither raises
    ``NotFoundError`` so a missing route is never silently defaulted.

    Example::

        resolver = TopicResolver({"product": "catalog.product.events"}, prefix="shop")
        resolver.resolve("product").name   # "catalog.product.events"
        resolver.resolve("order").name     # "shop.order"
    """

    def __init__(
        self,
        topics: Mapping[str, str | Topic] | None = None,
        prefix: str | None = None,
    ) -> None:
        self._topics: dict[str, Topic] = {
            name.lower(): (t if isinstance(t, Topic) else Topic(t))
            for name, t in (topics or {}).items()
        }
        self._prefix = prefix or None

    @classmethod
    def from_settings(cls, settings: PublisherSettings) -> "TopicResolver":
        return cls(settings.topic_map(), prefix=settings.topic_prefix)

    def resolve(self, aggregate_name: str) -> Topic:
        key = aggregate_name.lower()
        topic = self._topics.get(key)
        if topic is not None:
            return topic
        if self._prefix is not None:
            return Topic(f"{self._prefix}.{key}")
        raise NotFoundError("Topic", aggregate_name)


__all__ = ["Topic", "TopicResolver"]
