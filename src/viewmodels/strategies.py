"""Blueprint resolution strategies for nested instances.

Each strategy is a pure function `(known, candidate) -> Maybe[BlueprintDescriptor]`.
`resolve_blueprint` runs them in order and returns the first success.
"""

from typing import Any, Callable, Sequence

from returns.maybe import Maybe, Nothing, Some
from returns.pipeline import is_successful

from core import get_logger
from runtime import read

from .analyzer import analyze_blueprint, instance_fingerprint
from .models import BlueprintDescriptor

logger = get_logger(__name__)

Strategy = Callable[[Sequence[BlueprintDescriptor], Any], Maybe[BlueprintDescriptor]]


def by_back_reference(known: Sequence[BlueprintDescriptor], candidate: Any) -> Maybe[BlueprintDescriptor]:
    """Use the instance's direct handle to its originating definition."""
    source = getattr(candidate, "source", None)
    if source is None:
        return Nothing
    for blueprint in known:
        if blueprint.raw is source:
            return Some(blueprint)
    source_name = read(source, "name")
    for blueprint in known:
        if source_name and blueprint.name == source_name:
            return Some(blueprint)
    # A definition the provider never listed; analyze it directly.
    return Some(analyze_blueprint(source))


def by_name(known: Sequence[BlueprintDescriptor], candidate: Any) -> Maybe[BlueprintDescriptor]:
    """Match the instance's reported name against blueprint names."""
    name = read(candidate, "name")
    if not isinstance(name, str) or not name:
        return Nothing
    return Maybe.from_optional(next((bp for bp in known if bp.name == name), None))


def by_fingerprint(known: Sequence[BlueprintDescriptor], candidate: Any) -> Maybe[BlueprintDescriptor]:
    """Match the instance's own property fingerprint; first equal blueprint wins."""
    fingerprint = instance_fingerprint(candidate)
    if not fingerprint:
        return Nothing
    return Maybe.from_optional(next((bp for bp in known if bp.fingerprint == fingerprint), None))


DEFAULT_CHAIN: tuple[Strategy, ...] = (by_back_reference, by_name, by_fingerprint)


def resolve_blueprint(
    known: Sequence[BlueprintDescriptor],
    candidate: Any,
    strategies: Sequence[Strategy] = DEFAULT_CHAIN,
) -> Maybe[BlueprintDescriptor]:
    """
    Resolve a nested instance's blueprint with first-success semantics.

    A strategy that raises counts as no match.
    """
    for strategy in strategies:
        try:
            result = strategy(known, candidate)
        except Exception as e:
            logger.warning("resolution_strategy_failed", strategy=strategy.__name__, error=str(e))
            continue
        if is_successful(result):
            logger.debug(
                "blueprint_resolved",
                strategy=strategy.__name__,
                blueprint=result.unwrap().name,
            )
            return result
    return Nothing
