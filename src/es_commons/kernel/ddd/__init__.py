"""DDD building blocks – public re-export surface."""

from es_commons.kernel.ddd.aggregate import AggregateRoot
from es_commons.kernel.ddd.domain_event import DomainEvent
from es_commons.kernel.ddd.entity import Entity
from es_commons.kernel.ddd.event_publisher import EventPublisher
from es_commons.kernel.ddd.event_recorder import EventRecorder
from es_commons.kernel.ddd.event_router import EventHandler, EventRouter, event_type_of
from es_commons.kernel.ddd.invariant import Invariant, ensure
from es_commons.kernel.ddd.repository import Repository

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "EventHandler",
    "EventPublisher",
    "EventRecorder",
    "EventRouter",
    "Invariant",
    "Repository",
    "ensure",
    "event_type_of",
]
