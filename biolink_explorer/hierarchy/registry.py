"""Entity registry - a name-keyed arena of class and relation entities.

Entities never hold references to each other. Parent, child and mixin
edges are integer ids assigned by the owning registry at first reference,
so traversal always goes through the registry that owns the entity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Generic, Iterator, TypeVar, Union

from biolink_explorer.utils import BiolinkError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Entity:
    """A node in a class or relation hierarchy.

    Attributes:
        entity_id: Surrogate id, unique within the owning registry
        name: Schema name, unique within the owning registry
        abstract: Declared ``abstract`` flag
        mixin: Declared ``mixin`` flag
        defined: True once the entity's own definition has been applied;
            False for placeholders only ever seen as someone's parent/mixin
        parent: Id of the primary (``is_a``) parent
        children: Ids of primary children, in declaration order
        mixin_parents: Ids of mixin parents, in declaration order
        mixin_children: Ids of entities that declare this one as a mixin
    """

    kind: ClassVar[str] = "entity"

    entity_id: int
    name: str
    abstract: bool = False
    mixin: bool = False
    defined: bool = False
    parent: int | None = None
    children: list[int] = field(default_factory=list)
    mixin_parents: list[int] = field(default_factory=list)
    mixin_children: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.entity_id,
            "kind": self.kind,
            "name": self.name,
            "abstract": self.abstract,
            "mixin": self.mixin,
            "defined": self.defined,
        }


@dataclass(eq=False)
class RelationEntity(Entity):
    """A slot (predicate or qualifier) definition."""

    kind: ClassVar[str] = "relation"


@dataclass
class Enumeration:
    """A named set of permissible values."""

    kind: ClassVar[str] = "enum"

    name: str
    description: str | None = None
    permissible_values: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "name": self.name,
            "description": self.description,
            "permissible_values": list(self.permissible_values),
        }


@dataclass
class QualifierOverride:
    """A slot_usage entry for a slot other than subject/object/predicate.

    Names are kept alongside the resolved targets so an unresolved name
    stays visible as data rather than being lost.
    """

    range_name: str | None = None
    range: Union["ClassEntity", Enumeration, None] = None
    subproperty_of_name: str | None = None
    subproperty_of: RelationEntity | None = None


@dataclass
class SlotOverrides:
    """Attribute overrides declared locally on a class.

    The three well-known slots are fixed fields; every other slot_usage key
    is kept, in declaration order, in ``qualifiers``.
    """

    subject: "ClassEntity | None" = None
    object: "ClassEntity | None" = None
    predicate: RelationEntity | None = None
    qualifiers: dict[str, QualifierOverride] = field(default_factory=dict)
    declared: list[str] = field(default_factory=list)


@dataclass(eq=False)
class ClassEntity(Entity):
    """A class definition, optionally carrying slot_usage overrides."""

    kind: ClassVar[str] = "class"

    overrides: SlotOverrides | None = None

    @property
    def has_overrides(self) -> bool:
        return self.overrides is not None and bool(self.overrides.declared)


Range = Union[ClassEntity, RelationEntity, Enumeration]

E = TypeVar("E", bound=Entity)


class EntityRegistry(Generic[E]):
    """Stores one entity per distinct name, creating placeholders on demand.

    There is no removal; the registry only grows until ``freeze`` is called.
    """

    def __init__(self, factory: type[E]) -> None:
        self._factory = factory
        self._entities: list[E] = []
        self._by_name: dict[str, int] = {}
        self._roots: list[int] = []
        self._frozen = False

    @property
    def kind(self) -> str:
        return self._factory.kind

    # -- Creation -------------------------------------------------------------

    def get_or_create(self, name: str) -> E:
        """Return the entity called ``name``, creating a placeholder if needed."""
        existing = self.get(name)
        if existing is not None:
            return existing
        if self._frozen:
            raise BiolinkError(f"Cannot add {self.kind} {name!r}: registry is frozen")

        entity = self._factory(entity_id=len(self._entities), name=name)
        self._entities.append(entity)
        self._by_name[name] = entity.entity_id
        logger.debug("Created %s placeholder #%d %r", self.kind, entity.entity_id, name)
        return entity

    def add_root(self, entity: E) -> None:
        if entity.entity_id not in self._roots:
            self._roots.append(entity.entity_id)

    def freeze(self) -> None:
        self._frozen = True

    # -- Lookup ---------------------------------------------------------------

    def get(self, name: str) -> E | None:
        """Return the entity called ``name``, or None."""
        entity_id = self._by_name.get(name)
        if entity_id is None:
            return None
        return self._entities[entity_id]

    def by_id(self, entity_id: int) -> E:
        return self._entities[entity_id]

    @property
    def roots(self) -> list[E]:
        return [self._entities[i] for i in self._roots]

    def names(self) -> list[str]:
        return [e.name for e in self._entities]

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._entities))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    # -- Edges ----------------------------------------------------------------

    def parent_of(self, entity: E) -> E | None:
        if entity.parent is None:
            return None
        return self._entities[entity.parent]

    def children_of(self, entity: E) -> list[E]:
        return [self._entities[i] for i in entity.children]

    def mixin_parents_of(self, entity: E) -> list[E]:
        return [self._entities[i] for i in entity.mixin_parents]

    def mixin_children_of(self, entity: E) -> list[E]:
        return [self._entities[i] for i in entity.mixin_children]
