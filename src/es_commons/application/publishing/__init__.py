"""Application – publication of aggregate domain events."""

from es_commons.application.publishing.publisher import AggregateEventPublisher
from es_commons.application.publishing.serializer import DomainEventSerializer
from es_commons.application.publishing.topic import Topic, TopicResolver

__all__ = [
    "AggregateEventPublisher",
    "DomainEventSerializer",
    "Topic",
    "TopicResolver",
]
