"""Top-level diaglinks settings."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._validation_detail import _validation_detail
from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .ScanSettings import ScanSettings


class DiaglinksConfig(BaseModel):
    """Settings file contents; every section has defaults."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanSettings = Field(default_factory=ScanSettings)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Path to the settings file, honoring DIAGLINKS_HOME."""
        return get_config_path()

    @classmethod
    def load(cls) -> "DiaglinksConfig":
        """Load and validate settings from file.

        A missing file yields the defaults.

        Raises:
            ConfigError: If the file is not valid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Configuration validation error: {_validation_detail(e)}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "scan": self.scan.model_dump(),
            "log": self.log.model_dump(),
        }
