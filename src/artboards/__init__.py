"""
Artboards
Assembles artboard descriptors: animations, state machines and bound view-models.
"""

from .assembler import active_artboard_name, assemble_artboards, attach_default_instance, parse_animations

__all__ = ["active_artboard_name", "assemble_artboards", "attach_default_instance", "parse_animations"]
