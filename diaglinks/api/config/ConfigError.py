"""Configuration error raised when settings or a scan session are invalid."""


class ConfigError(Exception):
    """Raised for invalid settings files or an unusable workspace root."""
