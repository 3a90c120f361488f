"""diaglinks - clickable source locations in build output."""
