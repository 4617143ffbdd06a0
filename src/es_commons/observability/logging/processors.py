"""Observability – get_logger helper and aggregate log context."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from es_commons.observability.logging.protocol import Logger

if TYPE_CHECKING:
    from es_commons.kernel.ddd import AggregateRoot


def get_logger(name: str | None = None, **initial_values: Any) -> Logger:
    """Return a structlog logger, optionally bound to *initial_values*.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def aggregate_context(aggregate: "AggregateRoot[Any]") -> dict[str, Any]:
    """Log fields identifying *aggregate*: name, id and current version."""
    return {
        "aggregate": aggregate.aggregate_name(),
        "aggregate_id": aggregate.id_as_string(),
        "version": aggregate.version,
    }


__all__ = ["aggregate_context", "get_logger"]
