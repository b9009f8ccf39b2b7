"""
Utility functions for biolink_explorer

Provides logging setup and the package exception hierarchy
"""

import logging
from pathlib import Path
from typing import Optional


# ═══════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging for biolink_explorer"""
    level = getattr(logging, log_level.upper())

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module"""
    return logging.getLogger(name)


# ═══════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════

class BiolinkError(Exception):
    """Base exception for biolink_explorer"""
    pass


class SchemaValidationError(BiolinkError):
    """Structural schema document failed validation"""

    def __init__(self, message: str, issues: Optional[list[str]] = None):
        super().__init__(message)
        self.issues = issues or []


class MissingAnchorError(BiolinkError):
    """A well-known anchor entity is absent after the build"""

    def __init__(self, anchor: str, name: str):
        super().__init__(f"Anchor {anchor!r} not found in schema: {name!r}")
        self.anchor = anchor
        self.name = name


class CyclicHierarchyError(BiolinkError):
    """An is_a or mixin cycle was reached during traversal"""

    def __init__(self, path: list[str]):
        super().__init__("Cyclic hierarchy: " + " -> ".join(path))
        self.path = path


class UnknownEntityError(BiolinkError, KeyError):
    """Lookup by name found no class or relation"""

    def __init__(self, kind: str, name: str):
        super().__init__(f"Unknown {kind}: {name!r}")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
