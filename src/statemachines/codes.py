"""State machine input type codes."""

from enum import Enum
from typing import Any, Mapping

from core import get_logger
from runtime import read

logger = get_logger(__name__)

UNKNOWN_INPUT_TYPE = "Unknown"


class InputKind(str, Enum):
    """Semantic state machine input types."""

    NUMBER = "Number"
    TRIGGER = "Trigger"
    BOOLEAN = "Boolean"


# Codes observed in raw `contents` records across runtime builds
BASELINE_CODES: Mapping[int, str] = {
    56: InputKind.NUMBER.value,
    58: InputKind.TRIGGER.value,
    59: InputKind.BOOLEAN.value,
}


def live_type_name(input_type: Any, namespace: Any = None) -> str:
    """
    Semantic name of a live input's type.

    Args:
        input_type: The live input's `type` (runtime enum value, Enum member or string)
        namespace: Runtime's input type namespace exposing Boolean/Number/Trigger

    Returns:
        "Boolean", "Number", "Trigger" or "Unknown"
    """
    if namespace is not None:
        for kind in InputKind:
            marker = read(namespace, kind.value)
            if marker is not None and marker == input_type:
                return kind.value
    if isinstance(input_type, InputKind):
        return input_type.value
    if isinstance(input_type, Enum):
        input_type = input_type.name
    if isinstance(input_type, str):
        for kind in InputKind:
            if input_type.lower() == kind.value.lower():
                return kind.value
    return UNKNOWN_INPUT_TYPE


class InputTypeCodeMap:
    """
    Session-scoped numeric code -> semantic name map.

    Learned entries only cover codes missing from the baseline table, and
    the first observation of a code wins.
    """

    def __init__(self, baseline: Mapping[int, str] = BASELINE_CODES):
        self.baseline = dict(baseline)
        self._learned: dict[int, str] = {}

    def learn(self, code: int, name: str, source: str = "") -> bool:
        """
        Record a calibrated code.

        Returns:
            True when the mapping was stored
        """
        if code in self.baseline:
            return False
        current = self._learned.get(code)
        if current is not None:
            if current != name:
                logger.warning(
                    "input_code_conflict",
                    code=code,
                    kept=current,
                    discarded=name,
                    input=source,
                )
            return False
        self._learned[code] = name
        logger.info("input_code_calibrated", code=code, type=name, input=source)
        return True

    def resolve(self, code: Any) -> str:
        """Baseline first, then learned codes, else "Unknown"."""
        if isinstance(code, bool) or not isinstance(code, int):
            return UNKNOWN_INPUT_TYPE
        if code in self.baseline:
            return self.baseline[code]
        return self._learned.get(code, UNKNOWN_INPUT_TYPE)

    def __contains__(self, code: object) -> bool:
        return code in self.baseline or code in self._learned

    def __len__(self) -> int:
        return len(self._learned)

    def as_dict(self) -> dict[int, str]:
        """Learned entries only."""
        return dict(self._learned)
