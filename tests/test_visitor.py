from patternkit.visitor import (
    ConcreteVisitorA,
    ConcreteVisitorB,
    ElementA,
    ElementB,
    ObjectStructure,
    Visitor,
    main,
)


class Recording(Visitor):
    def visit_element_a(self, element):
        return element.operation_a()

    def visit_element_b(self, element):
        return element.operation_b()


def test_double_dispatch_in_insertion_order():
    structure = ObjectStructure()
    for element in (ElementB(), ElementA(), ElementB()):
        structure.add_element(element)
    assert structure.accept(Recording()) == [
        "ElementB operation",
        "ElementA operation",
        "ElementB operation",
    ]


def test_empty_structure_visits_nothing():
    assert ObjectStructure().accept(Recording()) == []


def test_concrete_visitor_prints_and_returns(capsys):
    line = ElementB().accept(ConcreteVisitorB())
    assert line == "ConcreteVisitorB visited ElementB: ElementB operation"
    assert capsys.readouterr().out == line + "\n"


def test_main_visits_everything(capsys):
    assert main() == 0
    assert capsys.readouterr().out == (
        "ConcreteVisitorA visited ElementA: ElementA operation\n"
        "ConcreteVisitorA visited ElementB: ElementB operation\n"
        "ConcreteVisitorB visited ElementA: ElementA operation\n"
        "ConcreteVisitorB visited ElementB: ElementB operation\n"
    )


def test_concrete_visitor_a_on_element_a():
    assert ElementA().accept(ConcreteVisitorA()) == (
        "ConcreteVisitorA visited ElementA: ElementA operation"
    )