"""
Runtime Handle Protocols
Shapes of the opaque animation-runtime objects the parser reads.

The runtime is weakly typed: any member below may be missing, raise, or
return None depending on the runtime build. These protocols document the
best case; the parser never assumes a handle actually satisfies them and
reads through runtime.access instead.
"""

from typing import Any, Callable, Mapping, Protocol, Sequence


class PropertyHandle(Protocol):
    """Typed property accessor result with a current value."""

    value: Any


class PropertyDeclaration(Protocol):
    """Declared view-model property."""

    name: str
    type: str


class ViewModelDefinition(Protocol):
    """Raw blueprint definition."""

    name: str
    instance_count: int
    instance_names: Sequence[str]

    def property_count(self) -> int:
        ...

    def property_by_index(self, index: int) -> PropertyDeclaration | None:
        ...

    def default_instance(self) -> "ViewModelInstance | None":
        ...


class ViewModelInstance(Protocol):
    """Live view-model instance."""

    name: str
    source: ViewModelDefinition | None

    def number(self, name: str) -> PropertyHandle | None:
        ...

    def string(self, name: str) -> PropertyHandle | None:
        ...

    def boolean(self, name: str) -> PropertyHandle | None:
        ...

    def color(self, name: str) -> PropertyHandle | None:
        ...

    def enum(self, name: str) -> PropertyHandle | None:
        ...

    def view_model(self, name: str) -> "ViewModelInstance | None":
        ...


class LinearAnimation(Protocol):
    """Timeline animation declared on an artboard."""

    name: str
    fps: int
    duration: int
    work_start: int
    work_end: int
    loop: int


class StateMachineDefinition(Protocol):
    """State machine declared on an artboard."""

    name: str


class ArtboardDefinition(Protocol):
    """Artboard declared in the file."""

    name: str

    def animation_count(self) -> int:
        ...

    def animation_by_index(self, index: int) -> LinearAnimation | None:
        ...

    def state_machine_count(self) -> int:
        ...

    def state_machine_by_index(self, index: int) -> StateMachineDefinition | None:
        ...


class RiveFile(Protocol):
    """Loaded file handle."""

    def artboard_count(self) -> int:
        ...

    def artboard_by_index(self, index: int) -> ArtboardDefinition | None:
        ...

    def view_model_count(self) -> int:
        ...

    def view_model_by_index(self, index: int) -> ViewModelDefinition | None:
        ...


class StateMachineInput(Protocol):
    """Strongly-typed live state machine input."""

    name: str
    type: Any


class FileAsset(Protocol):
    """Asset referenced by the file, offered to the asset-load hook."""

    name: str
    cdn_uuid: str


class RiveSession(Protocol):
    """Normalized handle to a loaded runtime session."""

    file: RiveFile
    artboard: Any
    view_model_instance: ViewModelInstance | None
    contents: Mapping[str, Any] | None
    input_types: Any

    def play(self, *args: Any) -> None:
        ...

    def default_view_model(self) -> ViewModelDefinition | None:
        ...

    def view_model_by_index(self, index: int) -> ViewModelDefinition | None:
        ...

    def enums(self) -> Sequence[Any]:
        ...

    def state_machine_inputs(self, name: str) -> Sequence[StateMachineInput]:
        ...


AssetLoader = Callable[..., bool]
"""Asset-load hook: called once per asset, returns True when it handled loading."""


class RiveEngine(Protocol):
    """Runtime library exposing the session constructor."""

    Rive: Callable[..., Any]
