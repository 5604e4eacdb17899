"""State machine and input parsing for one artboard."""

from typing import Any

from core import get_logger
from document.models import InputDescriptor, StateMachineDescriptor
from runtime import indexed, read

from .codes import InputTypeCodeMap, UNKNOWN_INPUT_TYPE
from .contents import artboard_contents, named_entry_inputs

logger = get_logger(__name__)


def input_type_name(raw_type: Any, code_map: InputTypeCodeMap) -> str:
    """Strings pass through, numeric codes go through the code map."""
    if isinstance(raw_type, str):
        return raw_type
    if isinstance(raw_type, int) and not isinstance(raw_type, bool):
        return code_map.resolve(raw_type)
    return UNKNOWN_INPUT_TYPE


def parse_state_machines(session: Any, artboard_def: Any, code_map: InputTypeCodeMap) -> list[StateMachineDescriptor]:
    """
    Describe every state machine declared on an artboard, in index order.

    Inputs come from the session's raw `contents`; a state machine missing
    there is still listed, with no inputs.
    """
    artboard_name = read(artboard_def, "name")
    contents = artboard_contents(session, artboard_name)
    if contents is None:
        logger.warning("artboard_contents_missing", artboard=artboard_name)

    machines = []
    for index, definition in indexed(artboard_def, "state_machine_count", "state_machine_by_index"):
        name = read(definition, "name")
        if not name:
            logger.warning("state_machine_nameless", artboard=artboard_name, index=index)
            continue

        inputs = []
        for record in named_entry_inputs(contents, name):
            input_name = read(record, "name")
            if not input_name:
                continue
            resolved = input_type_name(read(record, "type"), code_map)
            if resolved == UNKNOWN_INPUT_TYPE:
                logger.warning(
                    "input_type_unknown",
                    state_machine=name,
                    input=input_name,
                    code=read(record, "type"),
                )
            inputs.append(InputDescriptor(name=str(input_name), type=resolved))

        machines.append(StateMachineDescriptor(name=name, inputs=inputs))
    return machines
