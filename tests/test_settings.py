"""Tests for environment-driven settings."""

from biolink_explorer.settings import AnchorNames, BiolinkSettings, get_settings, reload_settings


class TestSettings:
    def test_defaults(self):
        settings = BiolinkSettings(_env_file=None)
        assert settings.root_class == "named thing"
        assert settings.root_relation == "related to"
        assert settings.association_root == "association"
        assert settings.qualifier_root == "qualifier"
        assert settings.log_level == "INFO"
        assert settings.schema_path is None

    def test_anchor_names(self):
        settings = BiolinkSettings(_env_file=None)
        assert settings.anchor_names() == AnchorNames()

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("BIOLINK_QUALIFIER_ROOT", "qualifier slot")
        monkeypatch.setenv("BIOLINK_LOG_LEVEL", "DEBUG")
        settings = BiolinkSettings(_env_file=None)
        assert settings.anchor_names().qualifier_root == "qualifier slot"
        assert settings.log_level == "DEBUG"

    def test_singleton_and_reload(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first
        monkeypatch.setenv("BIOLINK_ROOT_CLASS", "entity")
        reloaded = reload_settings()
        assert reloaded is not first
        assert reloaded.root_class == "entity"
