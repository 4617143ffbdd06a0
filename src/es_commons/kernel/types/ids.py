"""String-based identifier value objects."""

from __future__ import annotations

import dataclasses
import hashlib
import uuid

from es_commons.kernel.errors.domain import ValidationError


def _uuid7_str() -> str:
    """Generate a UUID v7 string, falling back to UUID v4 when uuid_utils is absent."""
    try:
        import uuid_utils  # type: ignore[import-untyped]

        return str(uuid_utils.uuid7())
    except ImportError:
        return str(uuid.uuid4())


def name_based_uuid(name: str) -> uuid.UUID:
    """Type 3 (MD5) UUID of the UTF-8 bytes of *name*, without a namespace.

    Unlike :func:`uuid.uuid3` no namespace is prepended, so the result is
    stable across runtimes that derive ids from raw name bytes.
    """
    digest = hashlib.md5(name.encode("utf-8"), usedforsecurity=False).digest()
    return uuid.UUID(bytes=digest, version=3)


@dataclasses.dataclass(frozen=True, slots=True)
class _StrId:
    """Base for string-typed identifiers."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError(f"{type(self).__name__} must not be empty")

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class EntityId(_StrId):
    """Aggregate / entity identifier.

    Examples::

        eid = EntityId.generate()             # new random id
        eid = EntityId.from_str("abc-123")    # from existing string
        eid = EntityId.from_name("Widget")    # deterministic, derived from a name
    """

    @classmethod
    def generate(cls) -> "EntityId":
        """Return a new random ``EntityId``."""
        return cls(_uuid7_str())

    @classmethod
    def from_str(cls, value: str) -> "EntityId":
        """Construct from an existing string identifier."""
        return cls(value)

    @classmethod
    def from_name(cls, name: str) -> "EntityId":
        """Return the name-based id for *name*; equal names give equal ids."""
        if not name:
            raise ValidationError("Cannot derive an EntityId from an empty name")
        return cls(str(name_based_uuid(name)))


@dataclasses.dataclass(frozen=True, slots=True)
class CorrelationId(_StrId):
    """Request correlation identifier propagated in message headers."""

    @classmethod
    def generate(cls) -> "CorrelationId":
        """Return a new random ``CorrelationId``."""
        return cls(_uuid7_str())


__all__ = [
    "CorrelationId",
    "EntityId",
    "name_based_uuid",
]
