"""Global enum extraction."""

from typing import Any

from core import get_logger
from runtime import count_of, has_method, read

from .models import EnumDescriptor

logger = get_logger(__name__)


def _describe(item: Any) -> EnumDescriptor | None:
    # Some builds wrap the payload in a `data_enum` attribute
    data = getattr(item, "data_enum", None) or item
    name = read(data, "name")
    values = read(data, "values")
    if not isinstance(name, str) or not isinstance(values, (list, tuple)):
        logger.warning("enum_unexpected_shape", item=type(item).__name__)
        return None
    return EnumDescriptor(name=name, values=[str(v) for v in values])


def extract_enums(session: Any, file: Any = None) -> list[EnumDescriptor]:
    """
    Global enums, from the session's `enums()` or the file's indexed accessors.

    Errors are logged and yield whatever was collected before them.
    """
    found: list[EnumDescriptor] = []

    if has_method(session, "enums"):
        try:
            items = session.enums()
            if not isinstance(items, (list, tuple)):
                logger.warning("enums_not_a_list", type=type(items).__name__)
                return found
            for item in items:
                descriptor = _describe(item)
                if descriptor is not None:
                    found.append(descriptor)
        except Exception as e:
            logger.error("enum_extraction_failed", source="session", error=str(e))
        return found

    count = count_of(file, "data_enum_count")
    if count is not None and has_method(file, "data_enum_by_index"):
        try:
            for index in range(count):
                descriptor = _describe(file.data_enum_by_index(index))
                if descriptor is not None:
                    found.append(descriptor)
        except Exception as e:
            logger.error("enum_extraction_failed", source="file", error=str(e))
        return found

    logger.warning("enum_accessor_missing")
    return found
