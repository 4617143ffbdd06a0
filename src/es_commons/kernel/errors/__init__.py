"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   │   └── InvalidEventPayloadError
    │   ├── NotFoundError
    │   ├── ConflictError
    │   └── NoHandlerRegisteredError
    ├── ApplicationError             (application.py)
    └── InfrastructureError          (infrastructure.py)
        ├── SerializationError
        └── PublicationError
"""

from es_commons.kernel.errors.application import ApplicationError
from es_commons.kernel.errors.base import BaseError
from es_commons.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvalidEventPayloadError,
    InvariantViolationError,
    NoHandlerRegisteredError,
    NotFoundError,
    ValidationError,
)
from es_commons.kernel.errors.infrastructure import (
    InfrastructureError,
    PublicationError,
    SerializationError,
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
