"""YAML configuration loader."""

from pathlib import Path
from typing import Any

import yaml


class YAMLConfigLoader:
    """Load console configuration from YAML files."""

    def __init__(self, config_path: Path | str = "portconsole.yaml") -> None:
        self._config_path = Path(config_path)

    def load(self) -> dict[str, Any]:
        """Load raw configuration data from YAML.

        Returns:
            Configuration dictionary, empty dict if file not found.
        """
        if not self._config_path.exists():
            return {}

        with open(self._config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {self._config_path}")
        return data

    @property
    def path(self) -> Path:
        """Get configuration file path."""
        return self._config_path
