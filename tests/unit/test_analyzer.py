"""Blueprint analyzer tests."""

import random

import pytest
from hypothesis import given, strategies as st

from viewmodels import (
    RawDefinition,
    ScalarPropertyDeclaration,
    analyze_all,
    analyze_blueprint,
    compute_fingerprint,
    instance_fingerprint,
)

from fakes import CountedDefinition, FakeDefinition, FakeInstance, FakeProperty

names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)
types = st.sampled_from(["number", "string", "boolean", "color", "enum", "trigger"])
declarations = st.lists(
    st.builds(ScalarPropertyDeclaration, name=names, type=types),
    max_size=12,
    unique_by=lambda d: d.name,
)


@given(declarations, st.randoms())
def test_fingerprint_order_independent(decls, rnd):
    """Property test: shuffling declarations keeps the fingerprint."""
    shuffled = list(decls)
    rnd.shuffle(shuffled)
    assert compute_fingerprint(decls) == compute_fingerprint(shuffled)


@given(declarations, declarations)
def test_fingerprint_discriminates(a, b):
    """Property test: different property sets give different fingerprints."""
    if set(a) != set(b):
        assert compute_fingerprint(a) != compute_fingerprint(b)


@pytest.mark.unit
def test_fingerprint_format():
    """Test sorted name:type pairs joined by |."""
    decls = [ScalarPropertyDeclaration("volume", "number"), ScalarPropertyDeclaration("label", "string")]
    assert compute_fingerprint(decls) == "label:string|volume:number"
    assert compute_fingerprint([]) == ""


@pytest.mark.unit
def test_analyze_splits_scalars_and_nested():
    """Test nested view-model declarations are kept apart, in order."""
    definition = FakeDefinition(
        "Player",
        [
            FakeProperty("score", "number"),
            FakeProperty("stats", "viewModel"),
            FakeProperty("name", "string"),
            FakeProperty("team", "viewModel", is_view_model=True),
        ],
        instance_count=2,
        instance_names=["P1", "P2"],
    )

    bp = analyze_blueprint(RawDefinition(definition, "Player"))

    assert bp.name == "Player"
    assert [d.name for d in bp.scalar_properties] == ["score", "name"]
    assert bp.nested_property_names == ("stats", "team")
    assert [d.signature for d in bp.declarations] == [
        "score:number",
        "stats:viewModel",
        "name:string",
        "team:viewModel",
    ]
    assert bp.fingerprint == "name:string|score:number"
    assert bp.instance_count == 2
    assert bp.instance_names == ("P1", "P2")
    assert bp.raw is definition


@pytest.mark.unit
def test_analyze_counted_shape():
    """Test count+index declaration access."""
    definition = CountedDefinition("Counter", [FakeProperty("count", "number"), FakeProperty("", "string")])

    bp = analyze_blueprint(definition)

    assert bp.name == "Counter"
    assert [d.signature for d in bp.scalar_properties] == ["count:number"]
    assert bp.instance_count == -1
    assert bp.instance_names == ()


@pytest.mark.unit
def test_instance_fingerprint():
    """Test instances without declarations fingerprint as empty."""
    assert instance_fingerprint(FakeInstance()) == ""
    with_props = FakeInstance(properties=[FakeProperty("x", "number")])
    assert instance_fingerprint(with_props) == "x:number"


@pytest.mark.unit
def test_analyze_all_skips_failures():
    """Test a definition that raises is skipped."""

    class Exploding:
        name = "Broken"

        @property
        def properties(self):
            raise RuntimeError("bad definition")

    good = FakeDefinition("Good", [FakeProperty("x", "number")])
    result = analyze_all([RawDefinition(Exploding(), "Broken"), RawDefinition(good, "Good")])

    assert [bp.name for bp in result] == ["Good"]


@pytest.mark.unit
def test_fingerprint_shuffle_examples():
    """Test a concrete shuffle keeps the fingerprint."""
    decls = [ScalarPropertyDeclaration(f"p{i}", "number") for i in range(10)]
    shuffled = decls[:]
    random.Random(7).shuffle(shuffled)
    assert compute_fingerprint(decls) == compute_fingerprint(shuffled)
