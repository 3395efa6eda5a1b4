"""Tests for Config and ResolverSettings."""

from __future__ import annotations

import pytest

from confpath.config import Config
from confpath.errors import ConfigError
from confpath.settings import ResolverSettings


class TestConfig:
    def test_get_nested(self) -> None:
        config = Config({"resolver": {"cache": True}})
        assert config.get("resolver.cache") is True

    def test_get_default(self) -> None:
        config = Config({"a": {"b": 1}})
        assert config.get("a.c") is None
        assert config.get("a.c", "fallback") == "fallback"
        assert config.get("a.b.c", "fallback") == "fallback"

    def test_literal_key_wins(self) -> None:
        config = Config({"a.b": 1, "a": {"b": 2}})
        assert config.get("a.b") == 1

    def test_has(self) -> None:
        config = Config({"a": {"b": None}})
        assert config.has("a.b") is True
        assert config.has("a.c") is False

    def test_empty(self) -> None:
        config = Config()
        assert config.data == {}
        assert config.get("anything", 5) == 5


class TestResolverSettings:
    def test_defaults(self) -> None:
        settings = ResolverSettings()
        assert settings.index_name == "config"
        assert settings.index_dir == "config"
        assert settings.extensions == (".yaml", ".yml", ".json")
        assert settings.cache is False

    def test_from_none(self) -> None:
        assert ResolverSettings.from_config(None) == ResolverSettings()

    def test_from_config_without_section(self) -> None:
        assert ResolverSettings.from_config(Config({"other": 1})) == ResolverSettings()

    def test_from_config(self) -> None:
        config = Config({"resolver": {"index_dir": "etc", "extensions": [".yml"], "cache": True}})
        settings = ResolverSettings.from_config(config)
        assert settings.index_dir == "etc"
        assert settings.extensions == (".yml",)
        assert settings.cache is True

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigError):
            ResolverSettings.from_config(Config({"resolver": {"bogus": 1}}))

    @pytest.mark.parametrize("extensions", [[], ["yaml"], ["."]])
    def test_bad_extensions(self, extensions: list[str]) -> None:
        with pytest.raises(ConfigError):
            ResolverSettings.from_config(Config({"resolver": {"extensions": extensions}}))

    @pytest.mark.parametrize("name", ["", "a.b", "a/b"])
    def test_bad_index_name(self, name: str) -> None:
        with pytest.raises(ConfigError):
            ResolverSettings.from_config(Config({"resolver": {"index_name": name}}))

    def test_section_not_mapping(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ResolverSettings.from_config(Config({"resolver": "yes"}))
        assert exc_info.value.code == "CONFIG_INVALID"

    def test_frozen(self) -> None:
        settings = ResolverSettings()
        with pytest.raises(Exception):
            settings.cache = True  # type: ignore[misc]
