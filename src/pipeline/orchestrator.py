"""
Parse Orchestrator
Loads a file through the runtime and assembles the output document.
"""

import asyncio
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core import (
    FatalLoadError,
    LogContext,
    ParseRequest,
    Settings,
    ValidationError,
    get_logger,
    get_settings,
    source_digest,
)
from artboards import assemble_artboards
from document import BlueprintSummary, PropertyType, RiveDocument, extract_enums
from runtime import LoadOutcome, SessionLoader, resolve_constructor
from runtime.protocols import RiveEngine, RiveSession
from statemachines import calibrate_input_types
from viewmodels import BlueprintDescriptor, analyze_all, fetch_raw_definitions, resolve_default_instance

from .context import ParseContext

logger = get_logger(__name__)


def summarize_blueprint(blueprint: BlueprintDescriptor) -> BlueprintSummary:
    """Blueprint entry of the output document."""
    return BlueprintSummary(
        blueprint_name=blueprint.name,
        blueprint_properties=[PropertyType(name=d.name, type=d.type) for d in blueprint.declarations],
        instance_names_from_definition=list(blueprint.instance_names),
        instance_count_from_definition=blueprint.instance_count,
    )


class RiveParser:
    """
    Turns a loaded runtime session into a RiveDocument.

    One parser can serve any number of parses; all per-parse state lives in
    the ParseContext handed to build_document.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def new_context(self, request: ParseRequest | None = None) -> ParseContext:
        return ParseContext(
            settings=self.settings,
            calibration=request.calibration if request is not None else None,
        )

    def build_document(self, session: RiveSession, context: ParseContext | None = None) -> RiveDocument:
        """
        Run the pipeline over a loaded session.

        Args:
            session: Normalized runtime session
            context: Per-parse state (a fresh one when omitted)

        Returns:
            Complete document; local failures appear as error-flagged nodes

        Raises:
            FatalLoadError: If the session carries no file
        """
        context = context or self.new_context()
        file = getattr(session, "file", None)
        if file is None:
            raise FatalLoadError("Rive file not available on loaded instance.")

        artboard_name, state_machine_name = context.calibration_names
        calibrate_input_types(session, context.code_map, artboard_name, state_machine_name)

        enums = extract_enums(session, file)

        raw = fetch_raw_definitions(file, session=session, settings=context.settings)
        blueprints = analyze_all(raw)

        default_instance = resolve_default_instance(session, blueprints, settings=context.settings)

        artboards = assemble_artboards(session, context.code_map, default_instance)

        document = RiveDocument(
            artboards=artboards,
            assets=list(context.assets.records),
            all_view_model_definitions_and_instances=[summarize_blueprint(bp) for bp in blueprints],
            global_enums=enums,
        )
        logger.info(
            "document_built",
            artboards=len(artboards),
            blueprints=len(blueprints),
            enums=len(enums),
            assets=len(context.assets),
            learned_codes=len(context.code_map),
        )
        return document

    async def parse(
        self,
        engine: RiveEngine,
        buffer: bytes,
        artboard: str | None = None,
        state_machine: str | None = None,
    ) -> RiveDocument:
        """
        Load `buffer` with the runtime and parse it once loading completes.

        Args:
            engine: Runtime module exposing the Rive constructor
            buffer: Raw .riv bytes
            artboard: Artboard to sample for input type calibration
            state_machine: State machine to sample for input type calibration

        Returns:
            Parsed document

        Raises:
            ValidationError: If the request is malformed
            FatalLoadError: If the file cannot be loaded or parsing fails outright
        """
        try:
            request = ParseRequest(buffer=buffer, artboard=artboard, state_machine=state_machine)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid parse request: {e}") from e

        context = self.new_context(request)
        with LogContext(parse_id=context.parse_id, source_digest=source_digest(request.buffer)):
            logger.info("parse_started", size=len(request.buffer), calibration=request.calibration is not None)
            document = await self._load(engine, request, context)
            logger.info("parse_completed")
            return document

    async def _load(self, engine: RiveEngine, request: ParseRequest, context: ParseContext) -> RiveDocument:
        constructor = resolve_constructor(engine)

        outcome = LoadOutcome()
        loader = SessionLoader(outcome, lambda session: self.build_document(session, context))

        options: dict[str, Any] = {
            "buffer": request.buffer,
            "asset_loader": context.assets,
            "on_load": loader.on_load,
            "on_load_error": loader.on_load_error,
        }
        artboard_name, state_machine_name = context.calibration_names
        if artboard_name and state_machine_name:
            # Keeps the sampled state machine live for calibration
            options["artboard"] = artboard_name
            options["state_machines"] = [state_machine_name]

        try:
            constructed = constructor(**options)
        except Exception as e:
            logger.error("runtime_construction_failed", error=str(e))
            outcome.reject(FatalLoadError(f"Rive failed to load file: {e}", e))
        else:
            loader.attach(constructed)

        try:
            return await asyncio.wait_for(outcome.future, timeout=self.settings.load_timeout)
        except asyncio.TimeoutError as e:
            logger.error("load_timed_out", timeout=self.settings.load_timeout)
            raise FatalLoadError(f"Rive did not finish loading within {self.settings.load_timeout}s.", e) from e


async def parse_rive_file(
    engine: Any,
    buffer: bytes,
    artboard: str | None = None,
    state_machine: str | None = None,
    settings: Settings | None = None,
) -> RiveDocument:
    """Parse one file with a throwaway RiveParser."""
    return await RiveParser(settings=settings).parse(engine, buffer, artboard, state_machine)
