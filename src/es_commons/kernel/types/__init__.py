"""Kernel value-object types – public re-export surface."""

from es_commons.kernel.types.ids import CorrelationId, EntityId, name_based_uuid

__all__ = [
    "CorrelationId",
    "EntityId",
    "name_based_uuid",
]
