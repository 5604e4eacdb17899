"""Lookups into the session's raw `contents` description."""

from typing import Any

from runtime import named_entry, read


def artboard_contents(session: Any, artboard_name: str) -> Any:
    """Raw contents record for an artboard (mapping- or list-shaped), or None."""
    contents = getattr(session, "contents", None)
    return named_entry(read(contents, "artboards"), artboard_name)


def state_machine_contents(session: Any, artboard_name: str, state_machine_name: str) -> Any:
    """Raw contents record for one state machine, or None."""
    artboard = artboard_contents(session, artboard_name)
    return named_entry(read(artboard, "stateMachines"), state_machine_name)


def raw_inputs(record: Any) -> list[Any]:
    """Input records of a state machine contents record ([] when absent)."""
    inputs = read(record, "inputs")
    return list(inputs) if isinstance(inputs, (list, tuple)) else []


def named_entry_inputs(artboard_record: Any, state_machine_name: str) -> list[Any]:
    """Input records of a state machine inside an artboard contents record."""
    return raw_inputs(named_entry(read(artboard_record, "stateMachines"), state_machine_name))
