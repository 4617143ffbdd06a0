"""Domain errors – business rule, invariant and aggregate definition failures."""

from __future__ import annotations

from typing import Any

from es_commons.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An aggregate invariant was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidEventPayloadError(ValidationError):
    """A domain event was constructed with domain-invalid arguments.

    Raised from the event's own validation, before the event ever reaches an
    aggregate, so aggregate state is never touched.
    """

    default_code = "invalid_event_payload"

    def __init__(self, event_type: str, message: str, **kwargs: Any) -> None:
        detail = {"event_type": event_type, **kwargs.pop("detail", {})}
        super().__init__(f"{event_type}: {message}", detail=detail, **kwargs)
        self.event_type = event_type


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state (e.g. a stale version)."""

    default_code = "conflict"


class NoHandlerRegisteredError(DomainError):
    """An event was routed to an aggregate that never registered its variant.

    This is a defect in the aggregate definition, not a transient condition:
    it must propagate and must never be retried.
    """

    default_code = "no_handler_registered"

    def __init__(self, event_type: str, *, aggregate: str | None = None, **kwargs: Any) -> None:
        msg = f"No handler registered for event '{event_type}'"
        if aggregate is not None:
            msg = f"{msg} on aggregate '{aggregate}'"
        detail = {"event_type": event_type}
        if aggregate is not None:
            detail["aggregate"] = aggregate
        super().__init__(msg, detail=detail, **kwargs)
        self.event_type = event_type
        self.aggregate = aggregate


__all__ = [
    "ConflictError",
    "DomainError",
    "InvalidEventPayloadError",
    "InvariantViolationError",
    "NoHandlerRegisteredError",
    "NotFoundError",
    "ValidationError",
]
