"""Match a (subject, predicate, object) triple against association classes.

Every concrete association class with slot_usage is a candidate. Its
inherited subject/object ranges and predicate constraint must each be an
ancestor-or-self of the corresponding query type. Matches come back
deepest first, so the first element is the most specific association.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from biolink_explorer.hierarchy.model import BiolinkModel
from biolink_explorer.hierarchy.registry import ClassEntity, Range, RelationEntity
from biolink_explorer.reasoning.inheritance import Slot, is_ancestor_or_self, resolve_inherited
from biolink_explorer.reasoning.qualifiers import QualifierBinding, resolve_qualifiers

logger = logging.getLogger(__name__)


@dataclass
class Association:
    """One association class that validly describes a query triple."""

    association: ClassEntity
    subject: Range
    predicate: Range
    object: Range
    depth: int
    qualifiers: list[QualifierBinding] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.association.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "association": self.association.name,
            "depth": self.depth,
            "subject": self.subject.name,
            "predicate": self.predicate.name,
            "object": self.object.name,
            "qualifiers": [q.to_dict() for q in self.qualifiers],
        }


def find_valid_associations(
    model: BiolinkModel,
    subject_type: ClassEntity,
    relation_type: RelationEntity,
    object_type: ClassEntity,
) -> list[Association]:
    """All associations satisfied by the triple, ordered by depth descending.

    Ties keep discovery (depth-first) order. Only the primary-child subtree
    of the association root is searched.
    """
    matches: list[Association] = []

    for candidate, depth in model.association_classes():
        if candidate.abstract or not candidate.has_overrides:
            continue

        subject_range = resolve_inherited(model, candidate, Slot.SUBJECT)
        object_range = resolve_inherited(model, candidate, Slot.OBJECT)
        predicate_range = resolve_inherited(model, candidate, Slot.PREDICATE)

        if not is_ancestor_or_self(model.classes, subject_type, subject_range):
            continue
        if not is_ancestor_or_self(model.classes, object_type, object_range):
            continue
        if not is_ancestor_or_self(model.relations, relation_type, predicate_range):
            continue

        matches.append(
            Association(
                association=candidate,
                subject=subject_range,
                predicate=predicate_range,
                object=object_range,
                depth=depth,
                qualifiers=resolve_qualifiers(model, candidate),
            )
        )

    matches.sort(key=lambda a: a.depth, reverse=True)
    logger.debug(
        "%d association(s) for (%s, %s, %s)",
        len(matches),
        subject_type.name,
        relation_type.name,
        object_type.name,
    )
    return matches


def query(
    model: BiolinkModel,
    subject_name: str,
    relation_name: str,
    object_name: str,
) -> list[Association]:
    """Name-based front door to find_valid_associations.

    Raises UnknownEntityError when a name is not in the model.
    """
    return find_valid_associations(
        model,
        model.require_class(subject_name),
        model.require_relation(relation_name),
        model.require_class(object_name),
    )
