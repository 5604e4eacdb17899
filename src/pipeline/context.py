"""Per-parse state."""

from dataclasses import dataclass, field

from core import CalibrationTarget, ParseID, Settings, get_settings, new_parse_id
from statemachines import InputTypeCodeMap

from .assets import AssetCollector


@dataclass
class ParseContext:
    """
    Everything one parse accumulates.

    A fresh context is created per parse, so concurrent parses never share
    learned input codes or collected assets.
    """

    settings: Settings = field(default_factory=get_settings)
    calibration: CalibrationTarget | None = None
    code_map: InputTypeCodeMap = field(default_factory=InputTypeCodeMap)
    assets: AssetCollector = field(default_factory=AssetCollector)
    parse_id: ParseID = field(default_factory=new_parse_id)

    @property
    def calibration_names(self) -> tuple[str | None, str | None]:
        """(artboard, state machine) to sample, falling back to settings."""
        if self.calibration is not None:
            return self.calibration.artboard, self.calibration.state_machine
        return self.settings.calibration_artboard, self.settings.calibration_state_machine
