"""Artboard assembler tests."""

import pytest

from artboards import assemble_artboards, attach_default_instance, parse_animations
from document import ParsedInstance

from fakes import FakeAnimation, FakeArtboard, FakeFile, FakeSession


@pytest.mark.unit
def test_animations_in_declaration_order():
    """Test animation fields and ordering."""
    board = FakeArtboard("Main", [FakeAnimation("Walk", loop=2), FakeAnimation("Idle", fps=24, work_start=5)])

    animations = parse_animations(board)

    assert [a.name for a in animations] == ["Walk", "Idle"]
    assert animations[0].loop_type == 2
    assert animations[1].model_dump(by_alias=True) == {
        "name": "Idle",
        "fps": 24,
        "duration": 120,
        "workStart": 5,
        "workEnd": 120,
        "loopType": 1,
    }


@pytest.mark.unit
def test_default_instance_attached_to_active_artboard(code_map):
    """Test only the active artboard receives the default instance."""
    main, side = FakeArtboard("Main"), FakeArtboard("Side")
    session = FakeSession(FakeFile([side, main]), artboard=main)
    default = ParsedInstance(instance_name="Instance", blueprint_name="Settings")

    boards = assemble_artboards(session, code_map, default)

    assert [b.name for b in boards] == ["Side", "Main"]
    assert boards[0].view_models == []
    assert boards[1].view_models == [default]


@pytest.mark.unit
def test_nameless_artboard_skipped(code_map):
    """Test artboards without a name are left out."""
    session = FakeSession(FakeFile([FakeArtboard(""), FakeArtboard("Main")]))

    boards = assemble_artboards(session, code_map)

    assert [b.name for b in boards] == ["Main"]
    assert boards[0].view_models == []


@pytest.mark.unit
def test_attach_deduplicates():
    """Test an equal instance/blueprint pair is not attached twice."""
    default = ParsedInstance(instance_name="Instance", blueprint_name="Settings")
    existing = [ParsedInstance(instance_name="Instance", blueprint_name="Settings")]

    assert attach_default_instance(existing, default) == existing
    other = [ParsedInstance(instance_name="Instance", blueprint_name="Hud")]
    assert len(attach_default_instance(other, default)) == 2


@pytest.mark.unit
def test_scenario_artboard(session, code_map):
    """Test the Main artboard with animation and state machine."""
    boards = assemble_artboards(session, code_map)

    main = boards[0]
    assert main.name == "Main"
    assert main.animations[0].name == "Idle"
    assert main.state_machines[0].inputs[0].type == "Boolean"


@pytest.mark.unit
def test_failing_section_keeps_artboard(code_map):
    """Test a section whose accessors raise is emptied without dropping the artboard."""

    class Corrupt(FakeArtboard):
        def animation_by_index(self, index):
            raise RuntimeError("truncated animation block")

    session = FakeSession(FakeFile([Corrupt("Broken", [FakeAnimation("A")], ["SM"]), FakeArtboard("Main")]))

    boards = assemble_artboards(session, code_map)

    assert [b.name for b in boards] == ["Broken", "Main"]
    assert boards[0].animations == []
    assert [sm.name for sm in boards[0].state_machines] == ["SM"]


@pytest.mark.unit
def test_failing_active_artboard_keeps_default_instance(code_map):
    """Test the default instance survives a failing section on the active artboard."""

    class Corrupt(FakeArtboard):
        def state_machine_by_index(self, index):
            raise RuntimeError("truncated state machine block")

    main = Corrupt("Main", [FakeAnimation("Idle")], ["SM1"])
    session = FakeSession(FakeFile([main]), artboard=main)
    default = ParsedInstance(instance_name="Instance", blueprint_name="Settings")

    boards = assemble_artboards(session, code_map, default)

    assert boards[0].state_machines == []
    assert [a.name for a in boards[0].animations] == ["Idle"]
    assert boards[0].view_models == [default]
