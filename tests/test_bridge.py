import pytest

from patternkit.bridge import (
    Abstraction,
    ConcreteImplementorA,
    ConcreteImplementorB,
    Implementor,
    RefinedAbstraction,
    main,
)


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Implementor()
    with pytest.raises(TypeError):
        Abstraction(ConcreteImplementorA())


@pytest.mark.parametrize(
    "implementor, entry",
    [
        (ConcreteImplementorA, "ConcreteImplementorA operationImpl"),
        (ConcreteImplementorB, "ConcreteImplementorB operationImpl"),
    ],
)
def test_refined_abstraction_delegates(capsys, implementor, entry):
    assert RefinedAbstraction(implementor()).operation() == entry
    assert capsys.readouterr().out == entry + "\n"


def test_implementor_can_be_swapped():
    abstraction = RefinedAbstraction(ConcreteImplementorA())
    abstraction.implementor = ConcreteImplementorB()
    assert abstraction.operation() == "ConcreteImplementorB operationImpl"


def test_main_runs_both_implementors(capsys):
    assert main() == 0
    assert capsys.readouterr().out == (
        "ConcreteImplementorA operationImpl\nConcreteImplementorB operationImpl\n"
    )