import pytest

from patternkit.documents import Chart, Table, TextBox
from patternkit.registry import PrototypeRegistry, main


def test_create_clone_returns_equal_copy():
    registry = PrototypeRegistry()
    prototype = TextBox("Default Text", 12)
    registry.register_prototype("TextBox", prototype)
    clone = registry.create_clone("TextBox")
    assert clone == prototype
    assert clone is not prototype


def test_each_clone_is_new():
    registry = PrototypeRegistry()
    registry.register_prototype("Chart", Chart("Sales Chart", [10, 20, 30]))
    first = registry.create_clone("Chart")
    second = registry.create_clone("Chart")
    assert first == second
    assert first is not second


def test_changing_clone_leaves_prototype_alone():
    registry = PrototypeRegistry()
    table = Table(3, 3)
    table.set_cell(0, 0, "Header1")
    registry.register_prototype("Table", table)
    clone = registry.create_clone("Table")
    clone.set_cell(0, 0, "changed")
    assert registry.create_clone("Table").cells[0][0] == "Header1"


def test_missing_key_raises():
    registry = PrototypeRegistry()
    with pytest.raises(KeyError):
        registry.create_clone("Image")


def test_register_replaces_existing():
    registry = PrototypeRegistry()
    registry.register_prototype("TextBox", TextBox("old"))
    registry.register_prototype("TextBox", TextBox("new"))
    assert len(registry) == 1
    assert "TextBox" in registry
    assert registry.create_clone("TextBox").text == "new"


def test_main_prints_clones(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Cloned Document Elements:"
    assert lines[1] == str(TextBox("Hello, Prototype Pattern!", 12))
    assert lines[-1] == str(Chart("Sales Chart", [10, 20, 30]))