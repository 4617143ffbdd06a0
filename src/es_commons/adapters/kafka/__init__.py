"""Kafka adapter – aiokafka producer and JSON record serializer."""
from es_commons.adapters.kafka.producer import KafkaProducer
from es_commons.adapters.kafka.serializer import KafkaMessageSerializer

__all__ = ["KafkaMessageSerializer", "KafkaProducer"]
