"""Configuration domain."""

from .ConfigError import ConfigError
from .DiaglinksConfig import DiaglinksConfig
from .Platform import Platform
from .ScanConfig import ScanConfig

__all__ = ["ConfigError", "DiaglinksConfig", "Platform", "ScanConfig"]
