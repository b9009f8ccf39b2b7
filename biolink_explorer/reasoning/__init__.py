"""Inheritance resolution and association matching over a BiolinkModel."""

from biolink_explorer.reasoning.associations import Association, find_valid_associations, query
from biolink_explorer.reasoning.inheritance import (
    Slot,
    find_override,
    is_ancestor_or_self,
    resolve_inherited,
)
from biolink_explorer.reasoning.qualifiers import QualifierBinding, resolve_qualifiers

__all__ = [
    "Association",
    "QualifierBinding",
    "Slot",
    "find_override",
    "find_valid_associations",
    "is_ancestor_or_self",
    "query",
    "resolve_inherited",
    "resolve_qualifiers",
]
