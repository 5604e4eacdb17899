"""
Command Line Entry Point
Parses a .riv file with an importable runtime binding and prints the document.
"""

import argparse
import asyncio
import importlib
import sys
from pathlib import Path

from returns.pipeline import is_successful

from core import (
    FatalLoadError,
    ValidationError,
    configure_logging,
    create_container,
    get_logger,
    get_settings,
    validate_document,
)

from .orchestrator import RiveParser

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rive-parser",
        description="Describe the artboards, view-models, state machines and assets of a .riv file as JSON",
    )
    parser.add_argument("input", type=Path, help="Input .riv file")
    parser.add_argument("--engine", required=True, help="Import path of the runtime module exposing Rive")
    parser.add_argument("--artboard", help="Artboard to sample for input type calibration")
    parser.add_argument("--state-machine", help="State machine to sample for input type calibration")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    parser.add_argument("--output", type=Path, help="Write the document here instead of stdout")
    return parser


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    engine = importlib.import_module(args.engine)
    parser = create_container(settings).get(RiveParser)

    try:
        document = await parser.parse(engine, args.input.read_bytes(), args.artboard, args.state_machine)
    except (FatalLoadError, ValidationError) as e:
        logger.error("parse_failed", input=str(args.input), error=str(e))
        return 1

    checked = validate_document(document.to_dict(), settings.max_document_depth)
    if not is_successful(checked):
        problem = checked.failure()
        logger.error("document_invalid", error=problem.message, field=problem.field)
        return 1
    return emit(document.to_json(indent=args.indent), args.output)


def emit(text: str, output: Path | None) -> int:
    if output is None:
        sys.stdout.write(text + "\n")
    else:
        output.write_text(text, encoding="utf-8")
        logger.info("document_written", path=str(output), size=len(text))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if not args.input.is_file():
        logger.error("input_missing", input=str(args.input))
        return 2
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
