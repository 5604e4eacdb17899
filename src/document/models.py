"""Output Document Models.

Serialized with camelCase keys (`by_alias=True`), which is the shape the
control-binding and asset-manager collaborators consume.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from core.json import safe_json_dumps


class DocumentModel(BaseModel):
    """Base for document nodes: immutable, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PropertyType(DocumentModel):
    """Declared name/type pair."""

    name: str
    type: str


class ScalarProperty(DocumentModel):
    """Resolved scalar property of an instance."""

    name: str
    type: str
    value: Any = None


class ParsedInstance(DocumentModel):
    """One resolved view-model instance and its nested instances."""

    instance_name: str
    blueprint_name: str
    properties: list[ScalarProperty] = Field(default_factory=list)
    nested_view_models: list["ParsedInstance"] = Field(default_factory=list)
    error: str | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_error(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if self.error is None:
            data.pop("error", None)
        return data

    @property
    def failed(self) -> bool:
        return self.error is not None


ParsedInstance.model_rebuild()


class AnimationDescriptor(DocumentModel):
    """Timeline animation on an artboard."""

    name: str
    fps: Any = None
    duration: Any = None
    work_start: Any = None
    work_end: Any = None
    loop_type: Any = None


class InputDescriptor(DocumentModel):
    """State machine input with its resolved type name."""

    name: str
    type: str


class StateMachineDescriptor(DocumentModel):
    """State machine and its inputs."""

    name: str
    inputs: list[InputDescriptor] = Field(default_factory=list)


class ArtboardDescriptor(DocumentModel):
    """Artboard with animations, state machines and bound view-model."""

    name: str
    animations: list[AnimationDescriptor] = Field(default_factory=list)
    state_machines: list[StateMachineDescriptor] = Field(default_factory=list)
    view_models: list[ParsedInstance] = Field(default_factory=list)


class AssetRecord(DocumentModel):
    """Asset referenced by the file."""

    name: str
    cdn_uuid: str = ""


class BlueprintSummary(DocumentModel):
    """Blueprint declaration as reported by its definition."""

    blueprint_name: str
    blueprint_properties: list[PropertyType] = Field(default_factory=list)
    instance_names_from_definition: list[str] = Field(default_factory=list)
    instance_count_from_definition: int = -1


class EnumDescriptor(DocumentModel):
    """Global enum and its values."""

    name: str
    values: list[str] = Field(default_factory=list)


class RiveDocument(DocumentModel):
    """Complete description of a loaded file."""

    artboards: list[ArtboardDescriptor] = Field(default_factory=list)
    assets: list[AssetRecord] = Field(default_factory=list)
    all_view_model_definitions_and_instances: list[BlueprintSummary] = Field(default_factory=list)
    global_enums: list[EnumDescriptor] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int = 0) -> str:
        """Serialize to a JSON string."""
        return safe_json_dumps(self.to_dict(), indent=indent)
