"""Definition Provider - enumerates raw blueprint definitions."""

from typing import Any

from core import get_logger, Settings, get_settings
from core.errors import DiscoveryError
from runtime import count_of, has_method, read

from .models import RawDefinition

logger = get_logger(__name__)


def _named(definition: Any) -> str | None:
    name = read(definition, "name")
    return name if isinstance(name, str) and name else None


def fetch_raw_definitions(
    file: Any,
    session: Any = None,
    settings: Settings | None = None,
) -> list[RawDefinition]:
    """
    Enumerate blueprint definitions by index.

    The session's `view_model_by_index` is preferred: its definitions carry
    full property access. The file's own accessor is the fallback. Whichever
    accessor is used, when the file reports no count it is scanned until a run
    of consecutive failures suggests the index range is exhausted.

    Args:
        file: Loaded file handle
        session: Loaded session (optional)
        settings: Scan limits

    Returns:
        Definitions in runtime index order
    """
    settings = settings or get_settings()
    count = count_of(file, "view_model_count")
    logger.debug("definition_count", count=count)

    if has_method(session, "view_model_by_index"):
        if count is not None:
            return _fetch_counted(session, count)
        logger.warning("definition_count_missing")
        return _scan(session, settings.max_definition_scan, settings.max_consecutive_scan_failures)
    if has_method(file, "view_model_by_index"):
        logger.warning("definition_fallback_to_file")
        limit = count if count else settings.max_definition_scan
        return _scan(file, limit, settings.max_consecutive_scan_failures)

    logger.error("definition_accessor_missing")
    return []


def _fetch_counted(session: Any, count: int) -> list[RawDefinition]:
    """Fetch exactly `count` definitions; the first error ends enumeration."""
    found = []
    for index in range(count):
        try:
            definition = session.view_model_by_index(index)
        except Exception as e:
            error = DiscoveryError(f"view_model_by_index({index}) raised: {e}")
            logger.error("definition_fetch_failed", index=index, error=str(error))
            break
        name = _named(definition)
        if name is None:
            logger.warning("definition_nameless", index=index)
            continue
        found.append(RawDefinition(definition=definition, name=name))
    return found


def _scan(source: Any, limit: int, max_failures: int) -> list[RawDefinition]:
    """Scan up to `limit` indices, stopping after `max_failures` in a row."""
    found = []
    failures = 0
    for index in range(limit):
        if failures >= max_failures:
            logger.debug("definition_scan_stopped", index=index, failures=failures)
            break
        try:
            definition = source.view_model_by_index(index)
        except Exception as e:
            failures += 1
            logger.warning("definition_scan_failed", index=index, error=str(e))
            continue
        name = _named(definition)
        if name is None:
            failures += 1
            logger.warning("definition_scan_empty", index=index)
            continue
        failures = 0
        found.append(RawDefinition(definition=definition, name=name))
    return found
