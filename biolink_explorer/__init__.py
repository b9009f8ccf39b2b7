"""
biolink_explorer
Class/slot hierarchy resolution and association matching for Biolink-style schemas
"""

__version__ = "0.1.0"

from biolink_explorer.hierarchy import BiolinkModel, build_model, load_model
from biolink_explorer.reasoning import (
    Association,
    QualifierBinding,
    Slot,
    find_valid_associations,
    is_ancestor_or_self,
    query,
    resolve_inherited,
    resolve_qualifiers,
)
from biolink_explorer.schema import BiolinkSchema, load_schema, parse_schema
from biolink_explorer.settings import AnchorNames, BiolinkSettings, get_settings
from biolink_explorer.utils import (
    BiolinkError,
    CyclicHierarchyError,
    MissingAnchorError,
    SchemaValidationError,
    UnknownEntityError,
)

__all__ = [
    "AnchorNames",
    "Association",
    "BiolinkError",
    "BiolinkModel",
    "BiolinkSchema",
    "BiolinkSettings",
    "CyclicHierarchyError",
    "MissingAnchorError",
    "QualifierBinding",
    "SchemaValidationError",
    "Slot",
    "UnknownEntityError",
    "build_model",
    "find_valid_associations",
    "get_settings",
    "is_ancestor_or_self",
    "load_model",
    "load_schema",
    "parse_schema",
    "query",
    "resolve_inherited",
    "resolve_qualifiers",
]
