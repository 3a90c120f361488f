"""Shared constants for diaglinks state directories and scanning defaults."""

DIAGLINKS_HOME_EXT = ".diaglinks"  # user-level state/config directory suffix

# Prefix CMake Tools puts in front of every line it forwards from the build
DEFAULT_LINE_MARKER = "[build] "

# Upper bound on filesystem checks in flight during one scan
DEFAULT_MAX_CONCURRENCY = 32
