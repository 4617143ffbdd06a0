"""Entity base class – identity-based equality."""

from __future__ import annotations

from typing import Generic, TypeVar

TId = TypeVar("TId")


class Entity(Generic[TId]):
    """Base entity – equality is identity-based (by ``id``).

    Two entities are equal only when they are of the exact same concrete
    type and carry equal ids; state is never compared.
    """

    def __init__(self, id: TId) -> None:  # noqa: A002
        self._id = id

    @property
    def id(self) -> TId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r})"


__all__ = ["Entity", "TId"]
