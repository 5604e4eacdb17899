"""
Output Document
Models for the serialized description of a loaded file.
"""

from .models import (
    AnimationDescriptor,
    ArtboardDescriptor,
    AssetRecord,
    BlueprintSummary,
    EnumDescriptor,
    InputDescriptor,
    ParsedInstance,
    PropertyType,
    RiveDocument,
    ScalarProperty,
    StateMachineDescriptor,
)
from .enums import extract_enums

__all__ = [
    "AnimationDescriptor",
    "ArtboardDescriptor",
    "AssetRecord",
    "BlueprintSummary",
    "EnumDescriptor",
    "InputDescriptor",
    "ParsedInstance",
    "PropertyType",
    "RiveDocument",
    "ScalarProperty",
    "StateMachineDescriptor",
    "extract_enums",
]
