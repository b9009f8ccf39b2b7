"""Pydantic v2 models for the structural Biolink schema document.

Every definition is partial: fields absent from the YAML default to None.
Unknown keys are kept (``extra="allow"``) so newer schema releases still
validate.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _string_keys(v: Any) -> Any:
    # YAML reads bare keys such as 0 or yes as int and bool
    if isinstance(v, dict):
        return {str(k): d for k, d in v.items()}
    return v


class Mappings(BaseModel):
    """Cross-ontology mapping lists shared by most definition kinds."""

    model_config = ConfigDict(extra="allow")

    mappings: list[str] | None = None
    broad_mappings: list[str] | None = None
    close_mappings: list[str] | None = None
    narrow_mappings: list[str] | None = None
    exact_mappings: list[str] | None = None
    related_mappings: list[str] | None = None


class SlotUsage(Mappings):
    """Per-class refinement of a slot (an attribute override)."""

    description: str | None = None
    required: bool | None = None
    multivalued: bool | None = None
    domain: str | None = None
    range: str | None = None
    subproperty_of: str | None = None
    symmetric: bool | None = None
    values_from: list[str] | None = None
    role: str | None = None
    aliases: list[str] | None = None
    examples: Any = None


class ClassDefinition(Mappings):
    is_a: str | None = None
    mixin: bool | None = None
    mixins: list[str] | None = None
    abstract: bool | None = None
    tree_root: bool | None = None
    deprecated: bool | None = None
    description: str | None = None
    alt_descriptions: dict[str, str] | None = None
    notes: list[str] | str | None = None
    comments: list[str] | None = None
    examples: Any = None
    see_also: list[str] | str | None = None
    values_from: list[str] | None = None
    aliases: list[str] | None = None
    defining_slots: list[str] | None = None
    id_prefixes: list[str] | None = None
    in_subset: list[str] | None = None
    union_of: list[str] | None = None
    local_names: dict[str, str] | None = None
    slots: list[str] | None = None
    slot_usage: dict[str, SlotUsage | None] | None = None

    @field_validator("slot_usage", mode="before")
    @classmethod
    def _slot_usage_keys(cls, v: Any) -> Any:
        return _string_keys(v)


class SlotAnnotations(BaseModel):
    model_config = ConfigDict(extra="allow")

    canonical_predicate: bool | None = None
    denormalized: bool | None = None
    opposite_of: str | None = None
    description: str | None = None


class SlotDefinition(Mappings):
    is_a: str | None = None
    mixin: bool | None = None
    mixins: list[str] | None = None
    abstract: bool | None = None
    inherited: bool | None = None
    is_class_field: bool | None = None
    inlined_as_list: bool | None = None
    deprecated: bool | None = None
    deprecated_element_has_exact_replacement: str | None = None
    identifier: bool | None = None
    values_from: list[str] | None = None
    inverse: str | None = None
    slot_uri: str | None = None
    aliases: list[str] | None = None
    description: str | None = None
    notes: list[str] | str | None = None
    comments: list[str] | str | None = None
    see_also: list[str] | str | None = None
    id_prefixes: list[str] | None = None
    designates_type: bool | None = None
    domain: str | None = None
    range: str | None = None
    multivalued: bool | None = None
    required: bool | None = None
    in_subset: list[str] | str | None = None
    local_names: dict[str, str] | None = None
    ifabsent: str | None = None
    symmetric: bool | None = None
    examples: list[Any] | None = None
    annotations: SlotAnnotations | None = None


class PermissibleValue(Mappings):
    is_a: str | None = None
    description: str | None = None
    notes: str | None = None
    aliases: list[str] | None = None
    meaning: str | None = None


class EnumDefinition(BaseModel):
    model_config = ConfigDict(extra="allow")

    description: str | None = None
    in_subset: list[str] | None = None
    permissible_values: dict[str, PermissibleValue | None] = Field(default_factory=dict)

    @field_validator("permissible_values", mode="before")
    @classmethod
    def _null_values(cls, v: Any) -> Any:
        return {} if v is None else _string_keys(v)


class TypeDefinition(Mappings):
    description: str | None = None
    typeof: str | None = None
    uri: str | None = None
    url: str | None = None
    base: str | None = None
    notes: list[str] | None = None
    aliases: list[str] | None = None
    id_prefixes: list[str] | None = None


class SubsetDefinition(BaseModel):
    model_config = ConfigDict(extra="allow")

    description: str | None = None


class BiolinkSchema(BaseModel):
    """A validated schema document.

    Only ``classes``, ``slots`` and ``enums`` feed the hierarchy engine; the
    remaining metadata is carried for completeness.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    description: str | None = None
    license: str | None = None
    prefixes: dict[str, str] | None = None
    default_prefix: str | None = None
    default_range: str | None = None
    default_curi_maps: list[str] | None = None
    emit_prefixes: list[str] | None = None
    subsets: dict[str, SubsetDefinition | None] | None = None
    imports: list[str] | None = None
    types: dict[str, TypeDefinition | None] = Field(default_factory=dict)

    slots: dict[str, SlotDefinition] = Field(default_factory=dict)
    classes: dict[str, ClassDefinition] = Field(default_factory=dict)
    enums: dict[str, EnumDefinition] = Field(default_factory=dict)

    @field_validator("types", "slots", "classes", "enums", mode="before")
    @classmethod
    def _null_tables(cls, v: Any) -> Any:
        return {} if v is None else _string_keys(v)

    @field_validator("slots", "classes", "enums", mode="before")
    @classmethod
    def _null_definitions(cls, v: Any) -> Any:
        # A bare "name:" line in YAML yields a null definition
        if isinstance(v, dict):
            return {str(k): ({} if d is None else d) for k, d in v.items()}
        return v
