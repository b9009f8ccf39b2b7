"""Resolve the qualifier slots an association declares in its slot_usage."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from biolink_explorer.hierarchy.model import BiolinkModel
from biolink_explorer.hierarchy.registry import ClassEntity, Enumeration, RelationEntity
from biolink_explorer.reasoning.inheritance import is_ancestor_or_self

logger = logging.getLogger(__name__)


@dataclass
class QualifierBinding:
    """A qualifier slot of an association and what its values may be."""

    qualifier: RelationEntity
    range: ClassEntity | Enumeration | None = None
    subproperty_of: RelationEntity | None = None

    @property
    def name(self) -> str:
        return self.qualifier.name

    @property
    def permissible_values(self) -> list[str] | None:
        """Allowed values when the range is an enumeration, else None."""
        if isinstance(self.range, Enumeration):
            return list(self.range.permissible_values)
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "qualifier": self.qualifier.name,
            "range": self.range.name if self.range is not None else None,
            "range_kind": self.range.kind if self.range is not None else None,
            "permissible_values": self.permissible_values,
            "subproperty_of": self.subproperty_of.name if self.subproperty_of else None,
        }


def resolve_qualifiers(model: BiolinkModel, association: ClassEntity) -> list[QualifierBinding]:
    """Bindings for the association's own qualifier overrides, in declaration order.

    Keys that do not name a relation descending from the qualifier root
    are dropped silently.
    """
    if association.overrides is None:
        return []

    bindings: list[QualifierBinding] = []
    for key, override in association.overrides.qualifiers.items():
        relation = model.get_relation(key)
        if relation is None:
            logger.debug("%s: slot_usage key %r is not a relation", association.name, key)
            continue
        if not is_ancestor_or_self(model.relations, relation, model.qualifier_root):
            logger.debug("%s: %r is not a qualifier", association.name, key)
            continue
        bindings.append(
            QualifierBinding(
                qualifier=relation,
                range=override.range,
                subproperty_of=override.subproperty_of,
            )
        )
    return bindings
