"""Shared test fixtures for the biolink_explorer test suite."""

import copy
import os
from pathlib import Path

import pytest

from biolink_explorer.hierarchy.model import build_model, load_model
from biolink_explorer.schema.loader import parse_schema
from biolink_explorer.settings import AnchorNames, reload_settings

# Keep developer environment variables out of the tests
for _key in list(os.environ):
    if _key.startswith("BIOLINK_"):
        del os.environ[_key]

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SCENARIO_ANCHORS = AnchorNames(
    root_class="named_thing",
    root_relation="related_to",
    association_root="association",
    qualifier_root="qualifier",
)

SCENARIO_SCHEMA = {
    "slots": {
        "related_to": {},
        "affects": {"is_a": "related_to"},
        "qualifier": {"abstract": True},
        "causal_mechanism_qualifier": {"is_a": "qualifier"},
        "knowledge_level": {},
    },
    "enums": {
        "CausalMechanismEnum": {
            "permissible_values": {"directly": None, "indirectly": None},
        },
    },
    "classes": {
        "named_thing": {},
        "chemical_entity": {"is_a": "named_thing"},
        "gene": {"is_a": "named_thing"},
        "association": {"abstract": True},
        "gene_to_chemical_association": {
            "is_a": "association",
            "slot_usage": {
                "subject": {"range": "gene"},
                "object": {"range": "chemical_entity"},
                "predicate": {"subproperty_of": "affects"},
            },
        },
    },
}


def make_model(data, anchors=SCENARIO_ANCHORS):
    """Validate a raw schema dict and build a model from it."""
    return build_model(parse_schema(data), anchors)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def scenario_data():
    """The gene / chemical / affects scenario as a raw document (mutable copy)."""
    return copy.deepcopy(SCENARIO_SCHEMA)


@pytest.fixture
def scenario_anchors():
    return SCENARIO_ANCHORS


@pytest.fixture
def scenario_model(scenario_data):
    return make_model(scenario_data)


@pytest.fixture
def mini_schema_path():
    return FIXTURES_DIR / "mini_biolink.yaml"


@pytest.fixture
def mini_model(mini_schema_path):
    """The trimmed Biolink excerpt, built with the default anchor names."""
    return load_model(mini_schema_path, AnchorNames())
