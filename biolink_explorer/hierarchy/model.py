"""The immutable, queryable model built from one schema document."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from biolink_explorer.hierarchy.builder import HierarchyBuilder
from biolink_explorer.hierarchy.registry import (
    ClassEntity,
    Entity,
    EntityRegistry,
    Enumeration,
    RelationEntity,
)
from biolink_explorer.schema.loader import load_schema
from biolink_explorer.schema.models import BiolinkSchema
from biolink_explorer.settings import AnchorNames, get_settings
from biolink_explorer.utils import CyclicHierarchyError, MissingAnchorError, UnknownEntityError

logger = logging.getLogger(__name__)


class BiolinkModel:
    """Class and relation hierarchies, enumerations and anchor entities.

    Read-only once constructed. All reasoning functions take a model and
    never mutate it, so a model can be shared between callers freely.
    """

    def __init__(
        self,
        classes: EntityRegistry[ClassEntity],
        relations: EntityRegistry[RelationEntity],
        enums: Mapping[str, Enumeration],
        anchors: AnchorNames,
    ) -> None:
        self._classes = classes
        self._relations = relations
        self._enums = MappingProxyType(dict(enums))
        self._anchor_names = anchors

        self._root_class = self._anchor(classes, "root_class", anchors.root_class)
        self._root_relation = self._anchor(relations, "root_relation", anchors.root_relation)
        self._association_root = self._anchor(
            classes, "association_root", anchors.association_root
        )
        self._qualifier_root = self._anchor(relations, "qualifier_root", anchors.qualifier_root)

    @staticmethod
    def _anchor(registry: EntityRegistry, role: str, name: str) -> Entity:
        entity = registry.get(name)
        if entity is None:
            raise MissingAnchorError(role, name)
        return entity

    # -- Tables ---------------------------------------------------------------

    @property
    def classes(self) -> EntityRegistry[ClassEntity]:
        return self._classes

    @property
    def relations(self) -> EntityRegistry[RelationEntity]:
        return self._relations

    @property
    def enums(self) -> Mapping[str, Enumeration]:
        return self._enums

    # -- Anchors --------------------------------------------------------------

    @property
    def anchor_names(self) -> AnchorNames:
        return self._anchor_names

    @property
    def root_class(self) -> ClassEntity:
        return self._root_class

    @property
    def root_relation(self) -> RelationEntity:
        return self._root_relation

    @property
    def association_root(self) -> ClassEntity:
        return self._association_root

    @property
    def qualifier_root(self) -> RelationEntity:
        return self._qualifier_root

    # -- Lookup ---------------------------------------------------------------

    def get_class(self, name: str) -> ClassEntity | None:
        return self._classes.get(name)

    def get_relation(self, name: str) -> RelationEntity | None:
        return self._relations.get(name)

    def get_enum(self, name: str) -> Enumeration | None:
        return self._enums.get(name)

    def require_class(self, name: str) -> ClassEntity:
        entity = self._classes.get(name)
        if entity is None:
            raise UnknownEntityError("class", name)
        return entity

    def require_relation(self, name: str) -> RelationEntity:
        entity = self._relations.get(name)
        if entity is None:
            raise UnknownEntityError("relation", name)
        return entity

    def registry_for(self, entity: Entity) -> EntityRegistry:
        """Return the registry that owns ``entity``."""
        if isinstance(entity, ClassEntity):
            return self._classes
        if isinstance(entity, RelationEntity):
            return self._relations
        raise TypeError(f"Not a hierarchy entity: {entity!r}")

    # -- Traversal helpers ----------------------------------------------------

    def association_classes(self) -> list[tuple[ClassEntity, int]]:
        """Primary-child subtree of the association root with depths, DFS order.

        Mixin children are not followed.
        """
        out: list[tuple[ClassEntity, int]] = []
        on_path: list[ClassEntity] = []

        def visit(entity: ClassEntity, depth: int) -> None:
            if entity in on_path:
                raise CyclicHierarchyError([e.name for e in on_path] + [entity.name])
            on_path.append(entity)
            out.append((entity, depth))
            for child in self._classes.children_of(entity):
                visit(child, depth + 1)
            on_path.pop()

        visit(self._association_root, 0)
        return out

    def ancestors(self, entity: Entity) -> list[Entity]:
        """Ancestors of ``entity`` (excluding itself), de-duplicated, in search order.

        The primary line is listed before mixin lines, matching the order
        in which overrides are inherited.
        """
        registry = self.registry_for(entity)
        seen: set[int] = {entity.entity_id}
        out: list[Entity] = []
        on_path: list[Entity] = []

        def visit(node: Entity) -> None:
            on_path.append(node)
            parents = []
            parent = registry.parent_of(node)
            if parent is not None:
                parents.append(parent)
            parents.extend(registry.mixin_parents_of(node))
            for p in parents:
                if p in on_path:
                    raise CyclicHierarchyError([e.name for e in on_path] + [p.name])
                if p.entity_id not in seen:
                    seen.add(p.entity_id)
                    out.append(p)
                    visit(p)
            on_path.pop()

        visit(entity)
        return out

    def undefined_entities(self) -> list[Entity]:
        """Entities only ever referenced, never defined (permanent placeholders)."""
        return [e for e in self._classes if not e.defined] + [
            e for e in self._relations if not e.defined
        ]

    def summary(self) -> dict[str, int]:
        return {
            "classes": len(self._classes),
            "relations": len(self._relations),
            "enums": len(self._enums),
            "class_roots": len(self._classes.roots),
            "relation_roots": len(self._relations.roots),
            "undefined": len(self.undefined_entities()),
        }


def build_model(schema: BiolinkSchema, anchors: AnchorNames | None = None) -> BiolinkModel:
    """Build a model from a validated schema.

    Raises MissingAnchorError if any anchor name is absent after the build.
    """
    if anchors is None:
        anchors = get_settings().anchor_names()

    classes, relations, enums = HierarchyBuilder(schema).build()
    model = BiolinkModel(classes, relations, enums, anchors)
    logger.info(
        "Built model: %d classes, %d relations, %d enums",
        len(classes),
        len(relations),
        len(enums),
    )
    return model


def load_model(path: Path | str, anchors: AnchorNames | None = None) -> BiolinkModel:
    """Load, validate and build a model from a YAML schema file."""
    return build_model(load_schema(path), anchors)
