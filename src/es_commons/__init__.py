"""
es_commons – event-applying aggregates and their publication seam.

Import path convention::

    from es_commons.kernel.ddd import AggregateRoot, DomainEvent
    from es_commons.kernel.errors import NoHandlerRegisteredError
    from es_commons.application.publishing import AggregateEventPublisher
    from es_commons.adapters.kafka import KafkaProducer
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
