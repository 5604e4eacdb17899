"""State-Machine Input Calibrator.

Learns numeric input type codes the baseline table does not cover by
joining one live state machine's strongly-typed inputs with its raw
`contents` records by input name.
"""

from typing import Any

from core import get_logger
from runtime import has_method, read

from .codes import InputTypeCodeMap, UNKNOWN_INPUT_TYPE, live_type_name
from .contents import raw_inputs, state_machine_contents

logger = get_logger(__name__)


def live_inputs(session: Any, artboard_name: str, state_machine_name: str) -> list[Any]:
    """Strongly-typed inputs of a live state machine ([] when unavailable)."""
    inputs = None
    if has_method(session, "state_machine_inputs"):
        inputs = session.state_machine_inputs(state_machine_name)
    if inputs is None and has_method(session, "state_machine_instance"):
        instance = session.state_machine_instance(state_machine_name, artboard_name)
        inputs = read(instance, "inputs")
    return list(inputs) if isinstance(inputs, (list, tuple)) else []


def calibrate_input_types(
    session: Any,
    code_map: InputTypeCodeMap,
    artboard_name: str | None,
    state_machine_name: str | None,
) -> InputTypeCodeMap:
    """
    Populate `code_map` from one sampled state machine.

    Without an artboard/state machine pair nothing is learned and unknown
    codes later surface as "Unknown". Never raises.

    Args:
        session: Loaded runtime session
        code_map: Session-scoped map to populate
        artboard_name: Artboard holding the sampled state machine
        state_machine_name: Sampled state machine

    Returns:
        The same code_map
    """
    if not artboard_name or not state_machine_name:
        logger.debug("calibration_skipped")
        return code_map

    try:
        _calibrate(session, code_map, artboard_name, state_machine_name)
    except Exception as e:
        logger.error(
            "calibration_failed",
            artboard=artboard_name,
            state_machine=state_machine_name,
            error=str(e),
        )
    return code_map


def _calibrate(session: Any, code_map: InputTypeCodeMap, artboard_name: str, state_machine_name: str) -> None:
    live = live_inputs(session, artboard_name, state_machine_name)
    raw = raw_inputs(state_machine_contents(session, artboard_name, state_machine_name))
    if not live or not raw:
        logger.warning(
            "calibration_source_missing",
            artboard=artboard_name,
            state_machine=state_machine_name,
            live=len(live),
            raw=len(raw),
        )
        return
    if len(live) != len(raw):
        logger.warning("calibration_count_mismatch", live=len(live), raw=len(raw))

    raw_by_name = {}
    for record in raw:
        raw_by_name.setdefault(read(record, "name"), record)

    namespace = getattr(session, "input_types", None)
    for live_input in live:
        name = read(live_input, "name")
        record = raw_by_name.get(name)
        if record is None:
            continue
        code = read(record, "type")
        if isinstance(code, bool) or not isinstance(code, int) or code in code_map.baseline:
            continue
        semantic = live_type_name(read(live_input, "type"), namespace)
        if semantic == UNKNOWN_INPUT_TYPE:
            logger.warning("calibration_live_type_unknown", input=name, code=code)
            continue
        code_map.learn(code, semantic, source=name)
