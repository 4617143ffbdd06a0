"""Repository port – generic async repository for aggregate roots."""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from es_commons.kernel.ddd.aggregate import AggregateRoot

TAggregate = TypeVar("TAggregate", bound=AggregateRoot[Any])


class Repository(abc.ABC, Generic[TAggregate]):
    """Port: persistence for aggregate roots.

    ``save`` is the optimistic-concurrency boundary: implementations compare
    the stored version with the version the aggregate was loaded at and
    raise ``ConflictError`` on mismatch.
    """

    @abc.abstractmethod
    async def get(self, id: Any) -> TAggregate | None: ...  # noqa: A002

    @abc.abstractmethod
    async def get_or_raise(self, id: Any) -> TAggregate: ...  # noqa: A002

    @abc.abstractmethod
    async def save(self, aggregate: TAggregate) -> None: ...


__all__ = ["Repository"]
