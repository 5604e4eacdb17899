"""Command line tests."""

import json

import pytest

from pipeline.cli import build_arg_parser, main


@pytest.mark.unit
def test_arguments():
    """Test option names and defaults."""
    args = build_arg_parser().parse_args(["scene.riv", "--engine", "rive_runtime", "--artboard", "Main", "--state-machine", "SM1"])

    assert args.engine == "rive_runtime"
    assert args.state_machine == "SM1"
    assert args.indent == 2
    assert args.output is None


@pytest.mark.unit
def test_writes_document(tmp_path):
    """Test a parse written to a file."""
    source = tmp_path / "scene.riv"
    source.write_bytes(b"RIVE\x07\x00")
    output = tmp_path / "scene.json"

    assert main([str(source), "--engine", "fake_engine", "--output", str(output)]) == 0

    doc = json.loads(output.read_text(encoding="utf-8"))
    assert doc["artboards"][0]["viewModels"][0]["instanceName"] == "Instance"


@pytest.mark.unit
def test_missing_input(tmp_path):
    """Test a missing input file."""
    assert main([str(tmp_path / "absent.riv"), "--engine", "fake_engine"]) == 2


@pytest.mark.unit
def test_empty_input_fails(tmp_path):
    """Test an empty file is refused."""
    source = tmp_path / "empty.riv"
    source.write_bytes(b"")
    assert main([str(source), "--engine", "fake_engine"]) == 1
