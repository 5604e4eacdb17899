"""Blueprint Analyzer - raw definition to BlueprintDescriptor."""

from typing import Any, Iterable, Iterator

from core import get_logger
from runtime import count_of, has_method, read

from .models import BlueprintDescriptor, PropertyDeclaration, RawDefinition, ScalarPropertyDeclaration

logger = get_logger(__name__)

FINGERPRINT_SEPARATOR = "|"
VIEW_MODEL_TYPE = "viewModel"


def iter_property_declarations(handle: Any) -> Iterator[Any]:
    """
    Yield the property declarations of a definition or instance.

    Array shape (`properties`) is tried first, count+index shape second.
    Declarations without a name or type are skipped.
    """
    properties = getattr(handle, "properties", None) if handle is not None else None
    if isinstance(properties, (list, tuple)):
        candidates: Iterable[Any] = properties
    elif has_method(handle, "property_count") and has_method(handle, "property_by_index"):
        candidates = (handle.property_by_index(i) for i in range(count_of(handle, "property_count") or 0))
    else:
        return

    for decl in candidates:
        if decl is not None and read(decl, "name") and read(decl, "type"):
            yield decl


def is_nested_declaration(decl: Any) -> bool:
    """True when the declaration is itself a view-model."""
    flag = read(decl, "is_view_model")
    if flag is None:
        return read(decl, "type") == VIEW_MODEL_TYPE
    return flag is True


def split_declarations(
    handle: Any,
) -> tuple[list[ScalarPropertyDeclaration], list[str], list[PropertyDeclaration]]:
    """Scalar declarations, nested property names and every declaration, each in declaration order."""
    scalars: list[ScalarPropertyDeclaration] = []
    nested: list[str] = []
    ordered: list[PropertyDeclaration] = []
    for decl in iter_property_declarations(handle):
        name = str(read(decl, "name"))
        if is_nested_declaration(decl):
            nested.append(name)
            ordered.append(PropertyDeclaration(name=name, type=VIEW_MODEL_TYPE))
        else:
            scalar = ScalarPropertyDeclaration(name=name, type=str(read(decl, "type")))
            scalars.append(scalar)
            ordered.append(scalar)
    return scalars, nested, ordered


def compute_fingerprint(declarations: Iterable[ScalarPropertyDeclaration]) -> str:
    """Canonical `name:type` signature, independent of declaration order."""
    ordered = sorted(declarations, key=lambda d: (d.name, d.type))
    return FINGERPRINT_SEPARATOR.join(d.signature for d in ordered)


def instance_fingerprint(instance: Any) -> str:
    """Fingerprint of a live instance's own declarations (empty if it exposes none)."""
    scalars, _, _ = split_declarations(instance)
    return compute_fingerprint(scalars)


def analyze_blueprint(raw: RawDefinition | Any) -> BlueprintDescriptor:
    """
    Build a descriptor from a raw definition.

    Accepts either a RawDefinition from the provider or a bare definition
    handle (e.g. an instance's back-reference).
    """
    if isinstance(raw, RawDefinition):
        definition, name = raw.definition, raw.name
    else:
        definition, name = raw, str(read(raw, "name") or "")

    scalars, nested, ordered = split_declarations(definition)

    count = count_of(definition, "instance_count")
    names = read(definition, "instance_names")
    names = tuple(str(n) for n in names) if isinstance(names, (list, tuple)) else ()

    descriptor = BlueprintDescriptor(
        name=name,
        raw=definition,
        scalar_properties=tuple(scalars),
        nested_property_names=tuple(nested),
        fingerprint=compute_fingerprint(scalars),
        instance_count=count if count is not None else -1,
        instance_names=names,
        declarations=tuple(ordered),
    )
    logger.debug(
        "blueprint_analyzed",
        blueprint=name,
        scalars=len(scalars),
        nested=len(nested),
        fingerprint=descriptor.fingerprint,
    )
    return descriptor


def analyze_all(raw_definitions: Iterable[RawDefinition]) -> list[BlueprintDescriptor]:
    """Analyze each definition, skipping (and logging) any that fail."""
    descriptors = []
    for raw in raw_definitions:
        try:
            descriptors.append(analyze_blueprint(raw))
        except Exception as e:
            logger.error("blueprint_analysis_failed", blueprint=raw.name, error=str(e))
    return descriptors
