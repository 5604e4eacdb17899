"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    ParserError,
    DiscoveryError,
    ResolutionError,
    ExtractionError,
    FatalLoadError,
)
from .validate import (
    ValidationError,
    ValidationResult,
    CalibrationTarget,
    ParseRequest,
    validate_document,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import safe_json_dumps, JSONEncodeError, validate_json_depth
from .hash import Algorithm, hash_bytes, source_digest
from .id import ParseID, new_parse_id


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ParserError",
    "DiscoveryError",
    "ResolutionError",
    "ExtractionError",
    "FatalLoadError",
    # Validation
    "ValidationError",
    "ValidationResult",
    "CalibrationTarget",
    "ParseRequest",
    "validate_document",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "safe_json_dumps",
    "JSONEncodeError",
    "validate_json_depth",
    # Hashing
    "Algorithm",
    "hash_bytes",
    "source_digest",
    # IDs
    "ParseID",
    "new_parse_id",
    # DI
    "create_container",
]
