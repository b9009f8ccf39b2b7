"""Entity registries, the two-phase hierarchy builder and the built model."""

from biolink_explorer.hierarchy.builder import HierarchyBuilder
from biolink_explorer.hierarchy.model import BiolinkModel, build_model, load_model
from biolink_explorer.hierarchy.registry import (
    ClassEntity,
    Entity,
    EntityRegistry,
    Enumeration,
    QualifierOverride,
    RelationEntity,
    SlotOverrides,
)

__all__ = [
    "BiolinkModel",
    "ClassEntity",
    "Entity",
    "EntityRegistry",
    "Enumeration",
    "HierarchyBuilder",
    "QualifierOverride",
    "RelationEntity",
    "SlotOverrides",
    "build_model",
    "load_model",
]
