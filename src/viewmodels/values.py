"""Value Extraction - one property accessor to one plain value.

Extraction never raises: missing accessors, missing values and accessor
exceptions all come back as descriptive sentinel strings.
"""

from typing import Any

from core import get_logger
from core.errors import ExtractionError
from runtime import plain

from .models import ScalarPropertyDeclaration

logger = get_logger(__name__)

TRIGGER_VALUE = "N/A (Trigger)"
ENUM_TYPES = frozenset({"enum", "enumType"})

_MISSING = object()


def argb_to_hex(argb: Any) -> str:
    """
    Format a 32-bit ARGB integer as `#RRGGBB`.

    Alpha is dropped; output is always six uppercase hex digits.

    Examples:
        >>> argb_to_hex(0xFFFF0000)
        '#FF0000'
        >>> argb_to_hex(0x00000000)
        '#000000'
    """
    if isinstance(argb, bool) or not isinstance(argb, int):
        return f"NOT_AN_ARGB_NUMBER ({type(argb).__name__}: {argb})"
    return "#%06X" % (argb & 0xFFFFFF)


def _accessor(instance: Any, kind: str) -> Any:
    accessor = getattr(instance, kind, None)
    return accessor if callable(accessor) else None


def _handle_value(handle: Any) -> Any:
    """Current value of a property handle, _MISSING if it has none."""
    if handle is None:
        return _MISSING
    return getattr(handle, "value", _MISSING)


def _typed_value(instance: Any, kind: str, label: str, name: str) -> Any:
    accessor = _accessor(instance, kind)
    if accessor is None:
        return f"{label} accessor unavailable"
    value = _handle_value(accessor(name))
    if value is _MISSING:
        return f"{label} value not found"
    return plain(value)


def _enum_value(instance: Any, name: str) -> Any:
    accessor = _accessor(instance, "enum")
    if accessor is not None:
        value = _handle_value(accessor(name))
        if value is not _MISSING:
            return plain(value)
    # Enum-typed properties are also readable through the string accessor
    fallback = _accessor(instance, "string")
    if fallback is None:
        return "Enum accessor unavailable (string fallback unavailable)"
    value = _handle_value(fallback(name))
    if value is _MISSING:
        return "Enum value not found (string fallback)"
    return plain(value)


def _color_value(instance: Any, name: str) -> Any:
    accessor = _accessor(instance, "color")
    if accessor is None:
        return "Color accessor unavailable"
    handle = accessor(name)
    raw = handle if isinstance(handle, int) and not isinstance(handle, bool) else _handle_value(handle)
    if isinstance(raw, str):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        return argb_to_hex(raw)
    shown = "missing" if raw is _MISSING else repr(raw)
    return f"Color not in expected ARGB format ({shown})"


def extract_value(instance: Any, decl: ScalarPropertyDeclaration) -> Any:
    """
    Read the current value of one scalar property.

    Args:
        instance: Live view-model instance
        decl: Declared property name and semantic type

    Returns:
        Plain value, or a sentinel string describing why none was read
    """
    try:
        if decl.type == "number":
            return _typed_value(instance, "number", "Number", decl.name)
        if decl.type == "string":
            return _typed_value(instance, "string", "String", decl.name)
        if decl.type == "boolean":
            return _typed_value(instance, "boolean", "Boolean", decl.name)
        if decl.type in ENUM_TYPES:
            return _enum_value(instance, decl.name)
        if decl.type == "color":
            return _color_value(instance, decl.name)
        if decl.type == "trigger":
            return TRIGGER_VALUE
        return f"UNHANDLED_PROPERTY_TYPE: {decl.type}"
    except Exception as e:
        error = ExtractionError(str(e))
        logger.warning("property_extraction_failed", property=decl.name, type=decl.type, error=str(error))
        return f"ERROR_IN_PROPERTY_EXTRACTION: {error}"
