"""Override resolution and ancestor reachability over the combined graph.

Both walks follow the primary ``is_a`` parent and the mixin parents of
each node. Override resolution is depth-first and first match wins: a
node's own override, then the whole primary ancestor line, then each
mixin line in declaration order. Nothing is merged.

A node reached again while it is still on the current path means the
schema has an ``is_a``/mixin cycle; that raises CyclicHierarchyError
instead of recursing forever. Nodes reached again by a different path
(diamonds) are fine and are only explored once.
"""

from __future__ import annotations

from enum import Enum

from biolink_explorer.hierarchy.model import BiolinkModel
from biolink_explorer.hierarchy.registry import ClassEntity, Entity, EntityRegistry, Range
from biolink_explorer.utils import CyclicHierarchyError


class Slot(str, Enum):
    """The well-known slots every association constrains."""

    SUBJECT = "subject"
    OBJECT = "object"
    PREDICATE = "predicate"


def parents_of(registry: EntityRegistry, entity: Entity) -> list[Entity]:
    """Primary parent first, then mixin parents in declaration order."""
    parents: list[Entity] = []
    parent = registry.parent_of(entity)
    if parent is not None:
        parents.append(parent)
    parents.extend(registry.mixin_parents_of(entity))
    return parents


def _cycle(on_path: list[Entity], node: Entity) -> CyclicHierarchyError:
    names = [e.name for e in on_path]
    start = names.index(node.name)
    return CyclicHierarchyError(names[start:] + [node.name])


def own_override(entity: ClassEntity, slot: Slot) -> Range | None:
    """The override ``entity`` itself declares for ``slot``, if any."""
    if entity.overrides is None:
        return None
    return getattr(entity.overrides, slot.value)


def find_override(
    registry: EntityRegistry[ClassEntity],
    entity: ClassEntity,
    slot: Slot,
) -> Range | None:
    """Nearest declared override for ``slot``, or None if no ancestor has one."""
    exhausted: set[int] = set()
    on_path: list[Entity] = []

    def search(node: ClassEntity) -> Range | None:
        if node in on_path:
            raise _cycle(on_path, node)
        if node.entity_id in exhausted:
            return None

        own = own_override(node, slot)
        if own is not None:
            return own

        on_path.append(node)
        for parent in parents_of(registry, node):
            found = search(parent)
            if found is not None:
                return found
        on_path.pop()
        exhausted.add(node.entity_id)
        return None

    return search(entity)


def resolve_inherited(model: BiolinkModel, entity: ClassEntity, slot: Slot | str) -> Range:
    """Resolve the inherited range of ``slot`` for a class.

    Falls back to the root class (subject/object) or the root relation
    (predicate) only when the full ancestor walk finds no override.
    """
    slot = Slot(slot)
    found = find_override(model.classes, entity, slot)
    if found is not None:
        return found
    if slot is Slot.PREDICATE:
        return model.root_relation
    return model.root_class


def is_ancestor_or_self(registry: EntityRegistry, candidate: Entity, target: object) -> bool:
    """True if ``target`` is ``candidate`` or reachable through parent/mixin edges.

    ``target`` may be any range (for instance an Enumeration); a target not
    owned by ``registry`` is never reached and yields False.
    """
    exhausted: set[int] = set()
    on_path: list[Entity] = []

    def walk(node: Entity) -> bool:
        if node is target:
            return True
        if node in on_path:
            raise _cycle(on_path, node)
        if node.entity_id in exhausted:
            return False

        on_path.append(node)
        for parent in parents_of(registry, node):
            if walk(parent):
                return True
        on_path.pop()
        exhausted.add(node.entity_id)
        return False

    return walk(candidate)
