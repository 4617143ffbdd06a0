"""Observability – structured logging helpers."""
from es_commons.observability.logging.factory import JsonLoggerFactory
from es_commons.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from es_commons.observability.logging.processors import aggregate_context, get_logger
from es_commons.observability.logging.protocol import Logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "aggregate_context",
    "get_logger",
]
