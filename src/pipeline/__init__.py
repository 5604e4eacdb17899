"""
Parse Pipeline
Per-parse context, asset observation and the orchestrating parser.
"""

from .assets import AssetCollector
from .context import ParseContext
from .orchestrator import RiveParser, parse_rive_file, summarize_blueprint

__all__ = ["AssetCollector", "ParseContext", "RiveParser", "parse_rive_file", "summarize_blueprint"]
