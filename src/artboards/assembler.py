"""Artboard Assembler."""

from typing import Any, Callable

from core import get_logger
from document.models import AnimationDescriptor, ArtboardDescriptor, ParsedInstance
from runtime import indexed, plain, read
from statemachines import InputTypeCodeMap, parse_state_machines

logger = get_logger(__name__)


def parse_animations(artboard_def: Any) -> list[AnimationDescriptor]:
    """Timeline animations in declaration order; nameless entries are skipped."""
    animations = []
    for index, animation in indexed(artboard_def, "animation_count", "animation_by_index"):
        name = read(animation, "name")
        if not name:
            logger.warning("animation_nameless", artboard=read(artboard_def, "name"), index=index)
            continue
        animations.append(
            AnimationDescriptor(
                name=name,
                fps=plain(read(animation, "fps")),
                duration=plain(read(animation, "duration")),
                work_start=plain(read(animation, "work_start")),
                work_end=plain(read(animation, "work_end")),
                loop_type=plain(read(animation, "loop")),
            )
        )
    return animations


def active_artboard_name(session: Any) -> str | None:
    """Name of the artboard active on the loaded session."""
    return read(getattr(session, "artboard", None), "name")


def attach_default_instance(
    view_models: list[ParsedInstance],
    default_instance: ParsedInstance,
) -> list[ParsedInstance]:
    """Append the default instance unless an equal (instance, blueprint) pair is present."""
    key = (default_instance.instance_name, default_instance.blueprint_name)
    if any((vm.instance_name, vm.blueprint_name) == key for vm in view_models):
        return view_models
    return [*view_models, default_instance]


def _guarded(artboard: str, section: str, parse: Callable[[], list[Any]]) -> list[Any]:
    """Run one section parser; a failure empties that section only."""
    try:
        return parse()
    except Exception as e:
        logger.error("artboard_section_failed", artboard=artboard, section=section, error=str(e), exc_info=True)
        return []


def assemble_artboards(
    session: Any,
    code_map: InputTypeCodeMap,
    default_instance: ParsedInstance | None = None,
) -> list[ArtboardDescriptor]:
    """
    Describe every artboard in the file.

    A section that fails to parse is left empty; the artboard itself, and
    any default instance attached to it, is always kept.

    Args:
        session: Loaded runtime session
        code_map: Calibrated input type codes for this parse
        default_instance: Parsed default view-model of the active artboard

    Returns:
        Artboards in runtime index order
    """
    file = getattr(session, "file", None)
    active = active_artboard_name(session)
    artboards = []

    for index, artboard_def in indexed(file, "artboard_count", "artboard_by_index"):
        name = read(artboard_def, "name")
        if not name:
            logger.warning("artboard_skipped", index=index)
            continue

        view_models: list[ParsedInstance] = []
        if default_instance is not None and name == active:
            view_models = attach_default_instance(view_models, default_instance)

        artboards.append(
            ArtboardDescriptor(
                name=name,
                animations=_guarded(name, "animations", lambda: parse_animations(artboard_def)),
                state_machines=_guarded(
                    name, "state_machines", lambda: parse_state_machines(session, artboard_def, code_map)
                ),
                view_models=view_models,
            )
        )
        logger.debug("artboard_assembled", artboard=name, active=name == active)

    return artboards
