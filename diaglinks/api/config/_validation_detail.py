"""Condense a pydantic ValidationError into a one-line message."""

from pydantic import ValidationError


def _validation_detail(error: ValidationError) -> str:
    """Return ``field: message`` for the first error in ``error``."""
    error_list = error.errors() or [{"msg": str(error), "loc": (), "type": "value_error", "input": None}]
    first = error_list[0]
    error_msg = first.get("msg", str(error))
    loc = first.get("loc", ())
    field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
    return f"{field}: {error_msg}" if field else error_msg
