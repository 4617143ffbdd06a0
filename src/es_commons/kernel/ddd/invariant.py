"""Invariant helpers for asserting domain rules."""

from __future__ import annotations

from typing import TypeVar

from es_commons.kernel.errors.domain import DomainError, InvariantViolationError

T = TypeVar("T")


class Invariant:
    """Namespace for invariant assertions."""

    @staticmethod
    def require(
        condition: bool,
        message: str,
        error: type[DomainError] = InvariantViolationError,
    ) -> None:
        """Raise *error* (``InvariantViolationError`` by default) when *condition* is False."""
        if not condition:
            raise error(message)

    @staticmethod
    def not_none(value: T | None, name: str = "value") -> T:
        """Assert *value* is not None, returning it typed."""
        if value is None:
            raise InvariantViolationError(f"{name} must not be None")
        return value


def ensure(condition: bool, message: str) -> None:
    """Shorthand for ``Invariant.require``."""
    Invariant.require(condition, message)


__all__ = ["Invariant", "ensure"]
