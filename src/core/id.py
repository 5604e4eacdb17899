"""ID Generation.

ULID-based identifiers for parse runs.

- K-sortable: parse logs line up by start time
- Prefixed: `parse_*` makes log lines easy to grep
"""

from typing import NewType
from ulid import ULID

ParseID = NewType("ParseID", str)
"""Identifier of a single parse run"""


class Prefix:
    """ID prefix constants."""

    PARSE = "parse"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


_generator = Generator()


def new_parse_id() -> ParseID:
    """Generate new parse ID."""
    return ParseID(_generator.generate_with_prefix(Prefix.PARSE))


__all__ = [
    "ParseID",
    "Prefix",
    "Generator",
    "new_parse_id",
]
