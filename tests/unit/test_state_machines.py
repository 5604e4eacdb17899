"""Input calibration and state machine parsing tests."""

import pytest

from statemachines import (
    InputKind,
    InputTypeCodeMap,
    calibrate_input_types,
    input_type_name,
    live_type_name,
    parse_state_machines,
)

from fakes import FakeArtboard, FakeFile, FakeInputTypes, FakeLiveInput, FakeSession


def calibration_session(raw_inputs, live):
    main = FakeArtboard("Main", state_machines=["SM1"])
    return FakeSession(
        FakeFile([main]),
        artboard=main,
        contents={"artboards": [{"name": "Main", "stateMachines": [{"name": "SM1", "inputs": raw_inputs}]}]},
        live_inputs={"SM1": live},
    )


@pytest.mark.unit
class TestCodeMap:
    """Test the per-parse code map."""

    def test_baseline_codes(self):
        code_map = InputTypeCodeMap()
        assert code_map.resolve(56) == "Number"
        assert code_map.resolve(58) == "Trigger"
        assert code_map.resolve(59) == "Boolean"
        assert code_map.resolve(12) == "Unknown"
        assert code_map.resolve("59") == "Unknown"

    def test_first_writer_wins(self):
        code_map = InputTypeCodeMap()
        assert code_map.learn(70, "Number") is True
        assert code_map.learn(70, "Boolean") is False
        assert code_map.resolve(70) == "Number"
        assert code_map.as_dict() == {70: "Number"}

    def test_baseline_not_overridden(self):
        code_map = InputTypeCodeMap()
        assert code_map.learn(59, "Number") is False
        assert code_map.resolve(59) == "Boolean"
        assert len(code_map) == 0

    def test_maps_are_independent(self):
        first, second = InputTypeCodeMap(), InputTypeCodeMap()
        first.learn(80, "Trigger")
        assert 80 in first
        assert 80 not in second


@pytest.mark.unit
def test_live_type_name():
    """Test the live type forms recognized."""
    assert live_type_name("bool", FakeInputTypes) == "Boolean"
    assert live_type_name("trigger") == "Trigger"
    assert live_type_name(InputKind.NUMBER) == "Number"
    assert live_type_name(3.5) == "Unknown"


@pytest.mark.unit
def test_calibration_learns_unknown_codes():
    """Test codes are learned by joining live and raw inputs by name."""
    session = calibration_session(
        [{"name": "Speed", "type": 71}, {"name": "Go", "type": 72}, {"name": "On", "type": 59}],
        [FakeLiveInput("Go", "trig"), FakeLiveInput("Speed", "num"), FakeLiveInput("On", "num")],
    )

    code_map = calibrate_input_types(session, InputTypeCodeMap(), "Main", "SM1")

    assert code_map.as_dict() == {71: "Number", 72: "Trigger"}
    assert code_map.resolve(59) == "Boolean"


@pytest.mark.unit
def test_calibration_conflict_keeps_first():
    """Test a conflicting later observation does not change a learned code."""
    session = calibration_session(
        [{"name": "A", "type": 90}, {"name": "B", "type": 90}],
        [FakeLiveInput("A", "num"), FakeLiveInput("B", "bool")],
    )

    code_map = calibrate_input_types(session, InputTypeCodeMap(), "Main", "SM1")

    assert code_map.resolve(90) == "Number"


@pytest.mark.unit
def test_calibration_skips_unknown_live_types():
    """Test unrecognized live types teach nothing."""
    session = calibration_session([{"name": "A", "type": 91}], [FakeLiveInput("A", object())])
    assert len(calibrate_input_types(session, InputTypeCodeMap(), "Main", "SM1")) == 0


@pytest.mark.unit
def test_calibration_without_target_or_with_errors():
    """Test calibration is a no-op without names and never raises."""

    class Exploding(FakeSession):
        def state_machine_inputs(self, name):
            raise RuntimeError("not instanced")

    session = Exploding(FakeFile())
    assert len(calibrate_input_types(session, InputTypeCodeMap(), None, None)) == 0
    assert len(calibrate_input_types(session, InputTypeCodeMap(), "Main", "SM1")) == 0


@pytest.mark.unit
def test_input_type_name():
    """Test string types pass through and codes are translated."""
    code_map = InputTypeCodeMap()
    code_map.learn(71, "Number")

    assert input_type_name("Boolean", code_map) == "Boolean"
    assert input_type_name(58, code_map) == "Trigger"
    assert input_type_name(71, code_map) == "Number"
    assert input_type_name(None, code_map) == "Unknown"


@pytest.mark.unit
def test_scenario_boolean_input(session, code_map):
    """Test a baseline Boolean code on SM1."""
    machines = parse_state_machines(session, session.file.artboard_by_index(0), code_map)

    assert [m.name for m in machines] == ["SM1"]
    assert machines[0].inputs[0].model_dump() == {"name": "Active", "type": "Boolean"}


@pytest.mark.unit
def test_state_machine_without_contents(code_map):
    """Test machines absent from contents are listed without inputs."""
    board = FakeArtboard("Side", state_machines=["Idle", "Walk"])
    session = FakeSession(FakeFile([board]))

    machines = parse_state_machines(session, board, code_map)

    assert [(m.name, m.inputs) for m in machines] == [("Idle", []), ("Walk", [])]


@pytest.mark.unit
def test_uncalibrated_code_is_unknown(code_map):
    """Test codes never calibrated surface as Unknown."""
    board = FakeArtboard("Main", state_machines=["SM2"])
    session = FakeSession(
        FakeFile([board]),
        contents={"artboards": {"Main": {"stateMachines": {"SM2": {"inputs": [{"name": "X", "type": 99}, {"type": 56}]}}}}},
    )

    machines = parse_state_machines(session, board, code_map)

    assert [(i.name, i.type) for i in machines[0].inputs] == [("X", "Unknown")]
