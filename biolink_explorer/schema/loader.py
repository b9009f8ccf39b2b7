"""Load a Biolink YAML document and validate it into a BiolinkSchema."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from biolink_explorer.schema.models import BiolinkSchema
from biolink_explorer.utils import SchemaValidationError

logger = logging.getLogger(__name__)


def format_issues(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``location: message`` lines."""
    issues: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        issues.append(f"{loc}: {err.get('msg', '')}" if loc else err.get("msg", ""))
    return issues


def parse_schema(data: Any) -> BiolinkSchema:
    """Validate an already-parsed document.

    Raises SchemaValidationError carrying the list of issues.
    """
    if not isinstance(data, dict):
        raise SchemaValidationError(
            "Schema document must be a mapping",
            [f"expected a mapping at top level, got {type(data).__name__}"],
        )

    t0 = time.perf_counter()
    try:
        schema = BiolinkSchema.model_validate(data)
    except ValidationError as e:
        issues = format_issues(e)
        logger.warning("Schema validation failed with %d issue(s)", len(issues))
        raise SchemaValidationError(
            f"Schema validation failed with {len(issues)} issue(s)", issues
        ) from e

    elapsed_ms = (time.perf_counter() - t0) * 1000
    logger.info(
        "Validated schema in %.2f ms: %d classes, %d slots, %d enums",
        elapsed_ms,
        len(schema.classes),
        len(schema.slots),
        len(schema.enums),
    )
    return schema


def load_schema(path: Path | str) -> BiolinkSchema:
    """Read a YAML schema file and validate it."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaValidationError(f"Could not parse YAML in {path}", [str(e)]) from e

    logger.debug("Parsed YAML document %s", path)
    return parse_schema(data)
