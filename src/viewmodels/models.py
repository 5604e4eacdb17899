"""Blueprint descriptors built from raw runtime definitions."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PropertyDeclaration:
    """Property declared on a blueprint, scalar or view-model."""

    name: str
    type: str

    @property
    def signature(self) -> str:
        return f"{self.name}:{self.type}"


@dataclass(frozen=True)
class ScalarPropertyDeclaration(PropertyDeclaration):
    """Scalar (non view-model) property declared on a blueprint."""


@dataclass(frozen=True)
class RawDefinition:
    """Raw blueprint definition paired with its reported name."""

    definition: Any
    name: str


@dataclass(frozen=True)
class BlueprintDescriptor:
    """Analyzed blueprint.

    Attributes:
        name: Blueprint name
        raw: Runtime definition handle (owned by the runtime, never mutated)
        scalar_properties: Scalar declarations in declaration order
        nested_property_names: Nested view-model property names in declaration order
        fingerprint: Sorted `name:type` pairs joined by `|`
        instance_count: Global instance count reported by the definition, -1 if unknown
        instance_names: Global instance names reported by the definition
        declarations: Every declaration in declaration order, view-models typed `viewModel`
    """

    name: str
    raw: Any = field(compare=False, repr=False)
    scalar_properties: tuple[ScalarPropertyDeclaration, ...] = ()
    nested_property_names: tuple[str, ...] = ()
    fingerprint: str = ""
    instance_count: int = -1
    instance_names: tuple[str, ...] = ()
    declarations: tuple[PropertyDeclaration, ...] = ()
