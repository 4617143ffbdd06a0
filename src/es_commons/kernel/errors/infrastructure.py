"""Infrastructure errors – serialization and transport failures."""

from __future__ import annotations

from typing import Any

from es_commons.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class PublicationError(InfrastructureError):
    """Sending a domain event to its transport failed.

    ``published`` is the number of events of the batch that were sent before
    the failure; they are not recalled.
    """

    default_code = "publication_error"

    def __init__(
        self,
        message: str,
        *,
        topic: str | None = None,
        published: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.topic = topic
        self.published = published


__all__ = [
    "InfrastructureError",
    "PublicationError",
    "SerializationError",
]
