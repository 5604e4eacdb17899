"""Request and document validation."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .json import JSONEncodeError, validate_json_depth

DOCUMENT_KEYS = ("artboards", "assets", "allViewModelDefinitionsAndInstances", "globalEnums")


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True
    )


class CalibrationTarget(RequestValidator):
    """Artboard/state machine pair sampled for input type calibration."""

    artboard: str = Field(min_length=1)
    state_machine: str = Field(min_length=1)


class ParseRequest(RequestValidator):
    """Validated parse request."""

    buffer: bytes = Field(min_length=1)
    artboard: str | None = None
    state_machine: str | None = None

    @model_validator(mode="after")
    def validate_calibration(self) -> "ParseRequest":
        """A state machine can only be sampled on a named artboard."""
        if self.state_machine and not self.artboard:
            raise ValueError("state_machine requires artboard for calibration")
        return self

    @property
    def calibration(self) -> CalibrationTarget | None:
        """Calibration pair, None unless both names are supplied."""
        if self.artboard and self.state_machine:
            return CalibrationTarget(artboard=self.artboard, state_machine=self.state_machine)
        return None


def validate_document(doc: dict[str, Any], max_depth: int = 256) -> Result[dict[str, Any], ValidationResult]:
    """
    Check a serialized document has the expected top-level shape.

    Args:
        doc: Output of RiveDocument.to_dict()
        max_depth: Maximum JSON nesting depth

    Returns:
        Result holding the document or the first problem found
    """
    for key in DOCUMENT_KEYS:
        if key not in doc:
            return Failure(ValidationResult(f"Document missing '{key}'", field=key))
        if not isinstance(doc[key], list):
            return Failure(ValidationResult(f"Document '{key}' must be a list", field=key, value=doc[key]))

    try:
        validate_json_depth(doc, max_depth)
    except JSONEncodeError as e:
        return Failure(ValidationResult(str(e)))

    return Success(doc)
