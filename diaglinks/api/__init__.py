"""diaglinks API layer."""
