"""
View-Model Parsing
Blueprint discovery and analysis, value extraction and recursive instance resolution.
"""

from .models import BlueprintDescriptor, PropertyDeclaration, RawDefinition, ScalarPropertyDeclaration
from .definitions import fetch_raw_definitions
from .analyzer import (
    analyze_all,
    analyze_blueprint,
    compute_fingerprint,
    instance_fingerprint,
    iter_property_declarations,
)
from .values import argb_to_hex, extract_value
from .strategies import DEFAULT_CHAIN, by_back_reference, by_fingerprint, by_name, resolve_blueprint
from .resolver import InstanceResolver, output_name_for
from .entry import find_default_entry_point, resolve_default_instance

__all__ = [
    "BlueprintDescriptor",
    "PropertyDeclaration",
    "RawDefinition",
    "ScalarPropertyDeclaration",
    "fetch_raw_definitions",
    "analyze_all",
    "analyze_blueprint",
    "compute_fingerprint",
    "instance_fingerprint",
    "iter_property_declarations",
    "argb_to_hex",
    "extract_value",
    "DEFAULT_CHAIN",
    "by_back_reference",
    "by_fingerprint",
    "by_name",
    "resolve_blueprint",
    "InstanceResolver",
    "output_name_for",
    "find_default_entry_point",
    "resolve_default_instance",
]
