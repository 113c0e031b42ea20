"""Configuration manager for phrasepack.

This module loads YAML configuration files and validates them with the
Pydantic models from the schema module.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .schema import LookupConfig, PackageConfig, PhrasePackConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loading and path normalization for phrasepack configuration files."""

    @staticmethod
    def load_config(config_path: Path) -> PhrasePackConfig:
        """
        Load and validate configuration from a YAML file.

        Relative lookup roots and the output directory are resolved against
        the directory holding the configuration file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            PhrasePackConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ValueError: If the document is not a mapping
            ValidationError: If the configuration fails Pydantic validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ValueError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        try:
            config = PhrasePackConfig.model_validate(config_data)
        except ValidationError as e:
            logger.error(f"Invalid configuration in {config_path}: {e.error_count()} error(s)")
            raise

        logger.debug(f"Loaded configuration from {config_path}")
        return ConfigManager.resolve_paths(config, config_path.parent)

    @staticmethod
    def resolve_paths(config: PhrasePackConfig, base_dir: Path) -> PhrasePackConfig:
        """
        Return a copy of config with relative paths anchored at base_dir.

        Args:
            config: Validated configuration
            base_dir: Directory relative paths are resolved against

        Returns:
            PhrasePackConfig with absolute lookup roots and output directory
        """

        def anchor(path: Path) -> Path:
            path = path.expanduser()
            return path if path.is_absolute() else (base_dir / path).resolve()

        def anchor_lookups(lookups: list[LookupConfig] | None) -> list[LookupConfig] | None:
            if lookups is None:
                return None
            return [lookup.model_copy(update={"root": anchor(lookup.root)}) for lookup in lookups]

        packages = {
            name: PackageConfig(
                i18n_client=anchor_lookups(package.i18n_client),
                i18n_server=anchor_lookups(package.i18n_server),
            )
            for name, package in config.packages.items()
        }

        return config.model_copy(
            update={
                "packages": packages,
                "output": config.output.model_copy(
                    update={"directory": anchor(config.output.directory)}
                ),
            }
        )
