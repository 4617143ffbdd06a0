"""Kernel – framework-agnostic building blocks (no I/O)."""

from es_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidEventPayloadError,
    InvariantViolationError,
    NoHandlerRegisteredError,
    NotFoundError,
    PublicationError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidEventPayloadError",
    "InvariantViolationError",
    "NoHandlerRegisteredError",
    "NotFoundError",
    "PublicationError",
    "SerializationError",
    "ValidationError",
]
