"""Instance Resolver - recursive view-model instance parser."""

from typing import Any, Sequence

from core import get_logger, Settings, get_settings
from core.errors import ResolutionError
from document.models import ParsedInstance, ScalarProperty
from runtime import read

from .models import BlueprintDescriptor
from .strategies import DEFAULT_CHAIN, Strategy, resolve_blueprint
from .values import extract_value

logger = get_logger(__name__)

ANONYMOUS_INSTANCE_NAME = "Instance"
BLUEPRINT_INSTANCE_NOT_FOUND = "Unknown (instance not found)"
BLUEPRINT_NOT_RESOLVED = "Unknown (blueprint not resolved)"

ERROR_INSTANCE_NOT_FOUND = "nested instance not found"
ERROR_ACCESSOR_MISSING = "nested view-model accessor unavailable"
ERROR_NOT_RESOLVED = "could not determine blueprint for nested instance"
ERROR_CYCLE = "cyclic reference detected"
ERROR_TOO_DEEP = "maximum nesting depth exceeded"


def instance_identity(instance: Any) -> int:
    """Identity of a live instance on the recursion path."""
    return id(instance)


def output_name_for(instance: Any, blueprint: BlueprintDescriptor, suggested: str) -> str:
    """
    Name an instance for output.

    A blueprint with exactly one global instance names it "Instance" when
    that instance is anonymous or is the only name the blueprint declares;
    otherwise the caller's suggestion (property or blueprint name) is kept.
    """
    if blueprint.instance_count == 1:
        authored = read(instance, "name")
        if authored == "" or len(blueprint.instance_names) <= 1:
            return ANONYMOUS_INSTANCE_NAME
    return suggested


class InstanceResolver:
    """
    Parses a live instance tree against the known blueprints.

    Every failure below the root is local: it becomes an error-flagged
    node and the rest of the tree is still parsed.
    """

    def __init__(
        self,
        known: Sequence[BlueprintDescriptor],
        settings: Settings | None = None,
        strategies: Sequence[Strategy] = DEFAULT_CHAIN,
    ):
        self.known = list(known)
        self.settings = settings or get_settings()
        self.strategies = tuple(strategies)

    def parse(
        self,
        instance: Any,
        output_name: str,
        blueprint: BlueprintDescriptor,
        visited: set[int] | None = None,
    ) -> ParsedInstance:
        """
        Parse an instance and everything nested under it.

        Args:
            instance: Live view-model instance
            output_name: Suggested name (blueprint name for a top-level instance)
            blueprint: Blueprint the instance is believed to conform to
            visited: Identities already on the recursion path

        Returns:
            Fully built ParsedInstance tree
        """
        visited = set() if visited is None else visited
        identity = instance_identity(instance)
        visited.add(identity)
        try:
            return self._parse(instance, output_name, blueprint, visited, depth=0)
        finally:
            visited.discard(identity)

    def _parse(
        self,
        instance: Any,
        output_name: str,
        blueprint: BlueprintDescriptor,
        visited: set[int],
        depth: int,
    ) -> ParsedInstance:
        name = output_name_for(instance, blueprint, output_name)
        logger.debug("instance_parse", instance=name, blueprint=blueprint.name, depth=depth)

        properties = [
            ScalarProperty(name=decl.name, type=decl.type, value=extract_value(instance, decl))
            for decl in blueprint.scalar_properties
        ]

        siblings: set[int] = set()
        nested = []
        for property_name in blueprint.nested_property_names:
            try:
                nested.append(self._nested(instance, property_name, visited, siblings, depth))
            except Exception as e:
                logger.error("nested_property_failed", property=property_name, error=str(e), exc_info=True)
                nested.append(_placeholder(property_name, BLUEPRINT_NOT_RESOLVED, f"error handling nested property: {e}"))

        return ParsedInstance(
            instance_name=name,
            blueprint_name=blueprint.name,
            properties=properties,
            nested_view_models=nested,
        )

    def _nested(
        self,
        parent: Any,
        property_name: str,
        visited: set[int],
        siblings: set[int],
        depth: int,
    ) -> ParsedInstance:
        accessor = getattr(parent, "view_model", None)
        if not callable(accessor):
            logger.warning("nested_accessor_missing", property=property_name)
            return _placeholder(property_name, BLUEPRINT_INSTANCE_NOT_FOUND, ERROR_ACCESSOR_MISSING)

        child = accessor(property_name)
        if child is None:
            logger.warning("nested_instance_missing", property=property_name)
            return _placeholder(property_name, BLUEPRINT_INSTANCE_NOT_FOUND, ERROR_INSTANCE_NOT_FOUND)

        identity = instance_identity(child)
        if identity in siblings:
            logger.info("nested_instance_shared", property=property_name)
        siblings.add(identity)

        resolved = resolve_blueprint(self.known, child, self.strategies).value_or(None)
        if resolved is None:
            error = ResolutionError(f"{ERROR_NOT_RESOLVED} '{property_name}'")
            logger.warning("nested_blueprint_unresolved", property=property_name, error=str(error))
            return _placeholder(property_name, BLUEPRINT_NOT_RESOLVED, ERROR_NOT_RESOLVED)

        if identity in visited:
            logger.warning("nested_cycle_detected", property=property_name, blueprint=resolved.name)
            return _placeholder(property_name, resolved.name, ERROR_CYCLE)

        if depth + 1 > self.settings.max_nesting_depth:
            logger.warning("nested_depth_exceeded", property=property_name, depth=depth + 1)
            return _placeholder(property_name, resolved.name, ERROR_TOO_DEEP)

        visited.add(identity)
        try:
            return self._parse(child, property_name, resolved, visited, depth + 1)
        finally:
            visited.discard(identity)


def _placeholder(name: str, blueprint_name: str, error: str) -> ParsedInstance:
    return ParsedInstance(instance_name=name, blueprint_name=blueprint_name, error=error)
