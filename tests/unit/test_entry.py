"""Default instance discovery tests."""

import pytest

from viewmodels import RawDefinition, analyze_all, find_default_entry_point, resolve_default_instance
from pipeline import RiveParser

from fakes import (
    CountedDefinition,
    FakeArtboard,
    FakeDefinition,
    FakeFile,
    FakeInstance,
    FakeProperty,
    FakeSession,
)


@pytest.mark.unit
def test_default_instance_from_definition(session, settings):
    """Test the blueprint's default instance is parsed when nothing is bound."""
    known = analyze_all([RawDefinition(d, d.name) for d in session.file._definitions])

    parsed = resolve_default_instance(session, known, settings=settings)

    assert parsed.instance_name == "Instance"
    assert parsed.blueprint_name == "Settings"
    theme = parsed.nested_view_models[0]
    assert theme.instance_name == "theme"
    assert theme.blueprint_name == "Theme"
    assert [p.value for p in theme.properties] == ["#3366CC", "dark"]


@pytest.mark.unit
def test_bound_instance_preferred():
    """Test an auto-bound instance of the default blueprint wins."""
    definition = FakeDefinition("Hud", [FakeProperty("hp", "number")], instance_count=2, instance_names=["a", "b"])
    definition.default = FakeInstance("a", values={"hp": 1}, source=definition)
    bound = FakeInstance("", values={"hp": 99}, source=definition)
    session = FakeSession(FakeFile(definitions=[definition]), artboard=object(), default_definition=definition, bound_instance=bound)

    instance, found, name = find_default_entry_point(session)

    assert instance is bound
    assert found is definition
    assert name == "Hud_autobound"


@pytest.mark.unit
def test_bound_instance_of_other_blueprint_ignored():
    """Test a bound instance of another blueprint is not used."""
    definition = FakeDefinition("Hud", instance_count=2)
    definition.default = FakeInstance("")
    other = FakeDefinition("Other")
    session = FakeSession(
        FakeFile(definitions=[definition]),
        artboard=object(),
        default_definition=definition,
        bound_instance=FakeInstance("x", source=other),
    )

    instance, _, name = find_default_entry_point(session)

    assert instance is definition.default
    assert name == "Hud_fromDefaultInstance"


@pytest.mark.unit
def test_no_default_view_model(settings):
    """Test sessions without a default view-model."""
    session = FakeSession(FakeFile(), artboard=object())
    assert find_default_entry_point(session) is None
    assert resolve_default_instance(session, [], settings=settings) is None

    no_artboard = FakeSession(FakeFile())
    assert find_default_entry_point(no_artboard) is None


class UnreadableDefinition(CountedDefinition):
    """Default blueprint whose declarations cannot be read."""

    def property_by_index(self, index):
        raise RuntimeError("bad index")

    def default_instance(self):
        return FakeInstance("", source=self)


def unreadable_default_session():
    main = FakeArtboard("Main")
    definition = UnreadableDefinition("Hidden", [FakeProperty("hp", "number")])
    return FakeSession(FakeFile([main]), artboard=main, default_definition=definition)


@pytest.mark.unit
def test_unlisted_default_that_fails_analysis(settings):
    """Test a default blueprint that cannot be analyzed yields no instance."""
    assert resolve_default_instance(unreadable_default_session(), [], settings=settings) is None


@pytest.mark.unit
def test_unlisted_default_failure_keeps_document(settings):
    """Test the document is still built when the default instance cannot be parsed."""
    doc = RiveParser(settings=settings).build_document(unreadable_default_session()).to_dict()

    assert [a["name"] for a in doc["artboards"]] == ["Main"]
    assert doc["artboards"][0]["viewModels"] == []
