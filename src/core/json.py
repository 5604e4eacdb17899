"""Fast JSON encoding for parser documents."""

from typing import Any
import json

import msgspec
import orjson


class JSONEncodeError(Exception):
    """Document could not be encoded."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent)

    Returns:
        JSON string

    Raises:
        JSONEncodeError: If no encoder accepts the object
    """
    indent = kwargs.get("indent", 0)

    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # e.g. integers outside the 64-bit range
            pass

        try:
            return msgspec.json.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    try:
        return json.dumps(obj, indent=indent if indent > 0 else None)
    except (TypeError, ValueError) as e:
        raise JSONEncodeError(f"Cannot encode {type(obj).__name__}: {e}", e) from e


def json_depth(obj: Any) -> int:
    """Nesting depth of a decoded JSON value (scalars are depth 0)."""
    if isinstance(obj, dict):
        return 1 + max((json_depth(v) for v in obj.values()), default=0)
    if isinstance(obj, list):
        return 1 + max((json_depth(v) for v in obj), default=0)
    return 0


def validate_json_depth(obj: Any, max_depth: int = 20) -> None:
    """
    Validate JSON nesting depth.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth

    Raises:
        JSONEncodeError: If depth exceeds limit
    """
    depth = json_depth(obj)
    if depth > max_depth:
        raise JSONEncodeError(f"JSON nesting depth {depth} exceeds maximum {max_depth}")
