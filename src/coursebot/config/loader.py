"""Config loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from coursebot.config.models import CourseBotConfig
from coursebot.core.errors import ConfigurationError

DEFAULT_FILENAMES = ("coursebot.yaml", "config.yaml")


class ConfigLoader:
    """Load CourseBotConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> CourseBotConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to config directory or coursebot.yaml file

        Returns:
            Parsed CourseBotConfig instance

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid.
        """
        config_path = Path(path)

        if config_path.is_dir():
            candidates = [config_path / name for name in DEFAULT_FILENAMES]
            yaml_file = next((c for c in candidates if c.exists()), None)
            if yaml_file is None:
                raise ConfigurationError(f"No config file found in {config_path}")
        else:
            yaml_file = config_path
            if not yaml_file.exists():
                raise ConfigurationError(f"Config file not found: {yaml_file}")

        try:
            with open(yaml_file, encoding="utf-8") as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {yaml_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {yaml_file}")

        try:
            return CourseBotConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config {yaml_file}: {e}") from e
