import pytest

from patternkit.prototype import ConcretePrototype, Prototype, main


def test_clone_is_equal_but_independent():
    original = ConcretePrototype(7)
    clone = original.clone()
    assert clone == original
    clone.value = 8
    assert (original.value, clone.value) == (7, 8)


def test_prototype_is_abstract():
    with pytest.raises(TypeError):
        Prototype()


def test_display_prints_and_returns(capsys):
    assert ConcretePrototype(3).display() == "ConcretePrototype with value: 3"
    assert capsys.readouterr().out == "ConcretePrototype with value: 3\n"


def test_main_displays_original_and_clone(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "ConcretePrototype with value: 42\n" * 2