"""
State Machines
Input type code calibration and state machine input parsing.
"""

from .codes import BASELINE_CODES, InputKind, InputTypeCodeMap, UNKNOWN_INPUT_TYPE, live_type_name
from .calibrator import calibrate_input_types, live_inputs
from .parser import input_type_name, parse_state_machines

__all__ = [
    "BASELINE_CODES",
    "InputKind",
    "InputTypeCodeMap",
    "UNKNOWN_INPUT_TYPE",
    "live_type_name",
    "calibrate_input_types",
    "live_inputs",
    "input_type_name",
    "parse_state_machines",
]
