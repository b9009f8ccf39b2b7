"""Structural schema document: pydantic models and YAML loading."""

from biolink_explorer.schema.loader import load_schema, parse_schema
from biolink_explorer.schema.models import (
    BiolinkSchema,
    ClassDefinition,
    EnumDefinition,
    SlotDefinition,
    SlotUsage,
)

__all__ = [
    "BiolinkSchema",
    "ClassDefinition",
    "EnumDefinition",
    "SlotDefinition",
    "SlotUsage",
    "load_schema",
    "parse_schema",
]
