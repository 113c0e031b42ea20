"""Tests for configuration manager functionality."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.phrasepack.config.manager import ConfigManager
from src.phrasepack.config.schema import PhrasePackConfig
from tests.utils.test_helpers import create_temp_config_file


class TestConfigManager:
    """Test cases for ConfigManager functionality."""

    def test_load_config_success(self, tmp_path: Path) -> None:
        """Test successful configuration loading."""
        config_data: dict[str, object] = {
            "packages": {
                "core": {"i18n_client": [{"root": "core/i18n", "patterns": ["*.yml"]}]},
            },
            "locales": {"default": "en", "enabled": ["en", "ru"]},
        }

        with create_temp_config_file(config_data, directory=tmp_path) as config_file:
            config = ConfigManager.load_config(config_file)

            assert isinstance(config, PhrasePackConfig)
            assert config.locales.enabled == ["en", "ru"]
            lookup = config.packages["core"].lookups_for("client")[0]
            assert lookup.patterns == ["*.yml"]

    def test_relative_paths_anchor_at_config_dir(self, tmp_path: Path) -> None:
        """Test relative roots and output directory resolve against the config file."""
        config_data: dict[str, object] = {
            "packages": {"core": {"i18n_server": [{"root": "core/i18n"}]}},
            "output": {"directory": "public/i18n"},
        }

        with create_temp_config_file(config_data, directory=tmp_path) as config_file:
            config = ConfigManager.load_config(config_file)

        base = tmp_path.resolve()
        assert config.packages["core"].lookups_for("server")[0].root == base / "core" / "i18n"
        assert config.packages["core"].i18n_client is None
        assert config.output.directory == base / "public" / "i18n"

    def test_absolute_paths_untouched(self, tmp_path: Path) -> None:
        """Test absolute paths are kept."""
        absolute_root = tmp_path / "elsewhere"
        config_data: dict[str, object] = {
            "packages": {"core": {"i18n_client": [{"root": str(absolute_root)}]}},
        }

        with create_temp_config_file(config_data, directory=tmp_path) as config_file:
            config = ConfigManager.load_config(config_file)

        assert config.packages["core"].lookups_for("client")[0].root == absolute_root

    def test_load_config_file_not_found(self) -> None:
        """Test loading config when file doesn't exist."""
        with pytest.raises(FileNotFoundError):
            _ = ConfigManager.load_config(Path("/non/existent/phrasepack.yml"))

    def test_load_config_invalid_yaml(self, tmp_path: Path) -> None:
        """Test loading config with invalid YAML syntax."""
        config_file = tmp_path / "phrasepack.yml"
        _ = config_file.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(yaml.YAMLError, match="Invalid YAML syntax"):
            _ = ConfigManager.load_config(config_file)

    def test_load_config_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        config_file = tmp_path / "phrasepack.yml"
        _ = config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a YAML dictionary"):
            _ = ConfigManager.load_config(config_file)

    def test_load_config_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file yields the default configuration."""
        config_file = tmp_path / "phrasepack.yml"
        _ = config_file.write_text("", encoding="utf-8")

        config = ConfigManager.load_config(config_file)

        assert config.packages == {}
        assert config.output.directory == tmp_path.resolve() / "build" / "i18n"

    def test_load_config_validation_error(self, tmp_path: Path) -> None:
        """Test loading config with validation errors."""
        config_data: dict[str, object] = {
            "packages": {"core": {"i18n_client": [{"patterns": ["*.yml"]}]}},
        }

        with create_temp_config_file(config_data, directory=tmp_path) as config_file:
            with pytest.raises(ValidationError):
                _ = ConfigManager.load_config(config_file)
