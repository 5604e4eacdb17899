"""
Runtime Adapter
Protocols for the animation runtime's handles and the load-completion adapter.
"""

from .access import has_method, read, count_of, indexed, named_entry, plain
from .loader import (
    LoadOutcome,
    SessionLoader,
    is_session,
    normalize_session,
    resolve_constructor,
)

__all__ = [
    "has_method",
    "read",
    "count_of",
    "indexed",
    "named_entry",
    "plain",
    "LoadOutcome",
    "SessionLoader",
    "is_session",
    "normalize_session",
    "resolve_constructor",
]
