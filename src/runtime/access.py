"""Helpers for reading weakly-typed runtime handles."""

from typing import Any, Iterator, Mapping

_MISSING = object()


def has_method(obj: Any, name: str) -> bool:
    """True when obj exposes a callable member called name."""
    return obj is not None and callable(getattr(obj, name, None))


def read(obj: Any, name: str, default: Any = None) -> Any:
    """
    Read a member that may be a plain attribute, a zero-argument method,
    or a mapping key.

    Runtime builds disagree on whether counts and names are properties or
    methods, and raw `contents` records arrive as dicts.
    """
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    value = getattr(obj, name, _MISSING)
    if value is _MISSING:
        return default
    if callable(value):
        return value()
    return value


def count_of(obj: Any, name: str) -> int | None:
    """Read an integer count; None when unavailable or not an int."""
    value = read(obj, name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def indexed(obj: Any, count_name: str, item_name: str) -> Iterator[tuple[int, Any]]:
    """Yield (index, item) for count+index shaped collections."""
    count = count_of(obj, count_name) or 0
    getter = getattr(obj, item_name, None)
    if not callable(getter):
        return
    for index in range(count):
        yield index, getter(index)


def named_entry(collection: Any, name: str) -> Any:
    """
    Look up an entry by name in a collection that is either a mapping
    keyed by name or a list of records carrying a `name`.
    """
    if isinstance(collection, Mapping):
        return collection.get(name)
    if isinstance(collection, (list, tuple)):
        for entry in collection:
            if read(entry, "name") == name:
                return entry
    return None


def plain(value: Any) -> Any:
    """Pass JSON primitives through; stringify anything else the runtime hands back."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [plain(item) for item in value]
    return str(value)
