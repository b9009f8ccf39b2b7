"""Populate class and relation registries from a validated schema.

The build runs in two phases per entity kind. Phase 1 walks every
declaration and materialises a placeholder for each name it mentions
(the entity itself, its ``is_a`` parent and its mixins), so forward
references always find an entity. Phase 2 applies each definition, in
declaration order, over its placeholder and wires the edges.

Relations and enumerations are built before classes because class
slot_usage ranges resolve against them.
"""

from __future__ import annotations

import logging
from typing import Mapping, Union

from biolink_explorer.hierarchy.registry import (
    ClassEntity,
    Entity,
    EntityRegistry,
    Enumeration,
    QualifierOverride,
    RelationEntity,
    SlotOverrides,
)
from biolink_explorer.schema.models import (
    BiolinkSchema,
    ClassDefinition,
    EnumDefinition,
    SlotDefinition,
    SlotUsage,
)

logger = logging.getLogger(__name__)

SUBJECT = "subject"
OBJECT = "object"
PREDICATE = "predicate"
WELL_KNOWN_SLOTS = (SUBJECT, OBJECT, PREDICATE)

Definition = Union[ClassDefinition, SlotDefinition]


def _materialize(definitions: Mapping[str, Definition], registry: EntityRegistry) -> None:
    for name, definition in definitions.items():
        registry.get_or_create(name)
        if definition.is_a:
            registry.get_or_create(definition.is_a)
        for mixin_name in definition.mixins or []:
            registry.get_or_create(mixin_name)


def _apply(name: str, definition: Definition, registry: EntityRegistry) -> Entity:
    entity = registry.get_or_create(name)

    if not definition.is_a:
        registry.add_root(entity)
    else:
        parent = registry.get_or_create(definition.is_a)
        parent.children.append(entity.entity_id)
        entity.parent = parent.entity_id

    entity.abstract = bool(definition.abstract)
    entity.mixin = bool(definition.mixin)

    for mixin_name in definition.mixins or []:
        mixin = registry.get_or_create(mixin_name)
        mixin.mixin_children.append(entity.entity_id)
        entity.mixin_parents.append(mixin.entity_id)

    entity.defined = True
    return entity


def build_relations(slots: Mapping[str, SlotDefinition]) -> EntityRegistry[RelationEntity]:
    """Build the relation (slot) hierarchy."""
    registry: EntityRegistry[RelationEntity] = EntityRegistry(RelationEntity)
    _materialize(slots, registry)
    for name, definition in slots.items():
        _apply(name, definition, registry)
    return registry


def build_enums(enums: Mapping[str, EnumDefinition]) -> dict[str, Enumeration]:
    """Build the enumeration table."""
    return {
        name: Enumeration(
            name=name,
            description=definition.description,
            permissible_values=list(definition.permissible_values),
        )
        for name, definition in enums.items()
    }


def resolve_range(
    name: str | None,
    classes: EntityRegistry[ClassEntity],
    enums: Mapping[str, Enumeration],
) -> ClassEntity | Enumeration | None:
    """Resolve a qualifier range name; enumerations win over classes."""
    if not name:
        return None
    if name in enums:
        return enums[name]
    return classes.get(name)


def resolve_overrides(
    slot_usage: Mapping[str, SlotUsage | None],
    classes: EntityRegistry[ClassEntity],
    relations: EntityRegistry[RelationEntity],
    enums: Mapping[str, Enumeration],
) -> SlotOverrides:
    """Turn a class's slot_usage into a SlotOverrides record.

    Names absent from the relevant table resolve to None.
    """
    overrides = SlotOverrides(declared=list(slot_usage))

    for slot_name, usage in slot_usage.items():
        range_name = usage.range if usage else None
        subproperty_name = usage.subproperty_of if usage else None

        if slot_name in (SUBJECT, OBJECT):
            target = classes.get(range_name) if range_name else None
            if range_name and target is None:
                logger.debug("Unresolved %s range %r", slot_name, range_name)
            setattr(overrides, slot_name, target)
        elif slot_name == PREDICATE:
            constraint_name = subproperty_name or range_name
            overrides.predicate = relations.get(constraint_name) if constraint_name else None
            if constraint_name and overrides.predicate is None:
                logger.debug("Unresolved predicate constraint %r", constraint_name)
        else:
            overrides.qualifiers[slot_name] = QualifierOverride(
                range_name=range_name,
                range=resolve_range(range_name, classes, enums),
                subproperty_of_name=subproperty_name,
                subproperty_of=relations.get(subproperty_name) if subproperty_name else None,
            )

    return overrides


def build_classes(
    classes: Mapping[str, ClassDefinition],
    relations: EntityRegistry[RelationEntity],
    enums: Mapping[str, Enumeration],
) -> EntityRegistry[ClassEntity]:
    """Build the class hierarchy, resolving slot_usage overrides."""
    registry: EntityRegistry[ClassEntity] = EntityRegistry(ClassEntity)
    _materialize(classes, registry)
    for name, definition in classes.items():
        entity = _apply(name, definition, registry)
        if definition.slot_usage is not None:
            entity.overrides = resolve_overrides(definition.slot_usage, registry, relations, enums)
    return registry


class HierarchyBuilder:
    """Builds all registries for one schema document.

    Not reentrant: a builder populates fresh registries on each ``build``
    call and hands them off; nothing may query them until it returns.
    """

    def __init__(self, schema: BiolinkSchema) -> None:
        self._schema = schema

    def build(self) -> tuple[
        EntityRegistry[ClassEntity],
        EntityRegistry[RelationEntity],
        dict[str, Enumeration],
    ]:
        relations = build_relations(self._schema.slots)
        enums = build_enums(self._schema.enums)
        classes = build_classes(self._schema.classes, relations, enums)

        for registry in (classes, relations):
            undefined = [e.name for e in registry if not e.defined]
            if undefined:
                logger.warning(
                    "%d %s name(s) referenced but never defined: %s",
                    len(undefined),
                    registry.kind,
                    ", ".join(sorted(undefined)),
                )
            registry.freeze()

        return classes, relations, enums
