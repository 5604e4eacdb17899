"""Default view-model instance discovery for the active artboard."""

from typing import Any, Sequence

from core import get_logger, Settings
from document.models import ParsedInstance
from runtime import has_method, read

from .analyzer import analyze_blueprint
from .models import BlueprintDescriptor
from .resolver import InstanceResolver

logger = get_logger(__name__)


def find_default_entry_point(session: Any) -> tuple[Any, Any, str] | None:
    """
    Locate the active artboard's default instance.

    Returns:
        (instance, raw definition, suggested output name), or None
    """
    artboard = getattr(session, "artboard", None)
    if artboard is None:
        logger.warning("no_active_artboard")
        return None
    if not has_method(session, "default_view_model"):
        logger.warning("default_view_model_unavailable", artboard=read(artboard, "name"))
        return None

    definition = session.default_view_model()
    blueprint_name = read(definition, "name")
    if not blueprint_name:
        logger.warning("default_view_model_missing", artboard=read(artboard, "name"))
        return None

    bound = getattr(session, "view_model_instance", None)
    if bound is not None and read(getattr(bound, "source", None), "name") == blueprint_name:
        name = read(bound, "name") or f"{blueprint_name}_autobound"
        logger.debug("default_instance_bound", instance=name, blueprint=blueprint_name)
        return bound, definition, name

    if has_method(definition, "default_instance"):
        instance = definition.default_instance()
        if instance is not None:
            name = read(instance, "name") or f"{blueprint_name}_fromDefaultInstance"
            logger.debug("default_instance_from_blueprint", instance=name, blueprint=blueprint_name)
            return instance, definition, name
        logger.warning("default_instance_empty", blueprint=blueprint_name)
        return None

    logger.warning("default_instance_unavailable", blueprint=blueprint_name)
    return None


def resolve_default_instance(
    session: Any,
    known: Sequence[BlueprintDescriptor],
    settings: Settings | None = None,
) -> ParsedInstance | None:
    """
    Parse the default instance of the active artboard, if there is one.

    The blueprint descriptor is taken from the known list by name and only
    analyzed afresh when the provider never listed it. Failures are logged
    and leave the document without a default instance.
    """
    try:
        entry = find_default_entry_point(session)
    except Exception as e:
        logger.error("default_instance_lookup_failed", error=str(e))
        return None
    if entry is None:
        return None
    instance, definition, suggested = entry

    try:
        name = read(definition, "name")
        blueprint = next((bp for bp in known if bp.name == name), None) or analyze_blueprint(definition)
        parsed = InstanceResolver(known, settings=settings).parse(instance, suggested, blueprint)
    except Exception as e:
        logger.error("default_instance_parse_failed", instance=suggested, error=str(e), exc_info=True)
        return None
    logger.info(
        "default_instance_parsed",
        instance=parsed.instance_name,
        blueprint=parsed.blueprint_name,
        nested=len(parsed.nested_view_models),
    )
    return parsed
