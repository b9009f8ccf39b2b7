"""biolink_explorer configuration settings using Pydantic.

Anchor names, default schema location and logging options, overridable
through ``BIOLINK_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class AnchorNames:
    """Names of the well-known entities the engine resolves at build time."""

    root_class: str = "named thing"
    root_relation: str = "related to"
    association_root: str = "association"
    qualifier_root: str = "qualifier"


class BiolinkSettings(BaseSettings):
    """Central configuration for biolink_explorer."""

    model_config = SettingsConfigDict(
        env_prefix="BIOLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Schema source ---
    schema_path: Path | None = Field(default=None)

    # --- Anchors ---
    root_class: str = Field(default="named thing")
    root_relation: str = Field(default="related to")
    association_root: str = Field(default="association")
    qualifier_root: str = Field(default="qualifier")

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_file: Path | None = None

    def anchor_names(self) -> AnchorNames:
        return AnchorNames(
            root_class=self.root_class,
            root_relation=self.root_relation,
            association_root=self.association_root,
            qualifier_root=self.qualifier_root,
        )


_settings: BiolinkSettings | None = None


def get_settings() -> BiolinkSettings:
    """Get global settings instance"""
    global _settings
    if _settings is None:
        _settings = BiolinkSettings()
    return _settings


def reload_settings() -> BiolinkSettings:
    """Re-read settings from the environment"""
    global _settings
    _settings = None
    return get_settings()
