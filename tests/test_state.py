import pytest

from patternkit.state import ConcreteStateA, ConcreteStateB, Context, State, main


class Counting(State):
    def __init__(self) -> None:
        self.calls = 0

    def handle(self):
        self.calls += 1
        return self.calls


def test_request_returns_what_the_state_returns():
    context = Context(Counting())
    assert [context.request(), context.request()] == [1, 2]


def test_transition_replaces_state(capsys):
    first, second = Counting(), Counting()
    context = Context(first)
    context.transition_to(second)
    context.request()
    assert context.state is second
    assert (first.calls, second.calls) == (0, 1)
    assert capsys.readouterr().out == "Context: Transition to Counting.\n"


@pytest.mark.parametrize(
    "state_type, text",
    [
        (ConcreteStateA, "ConcreteStateA handles the request."),
        (ConcreteStateB, "ConcreteStateB handles the request."),
    ],
)
def test_concrete_state_reports(capsys, state_type, text):
    assert Context(state_type()).request() == text
    assert capsys.readouterr().out == text + "\n"


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()


def test_main_switches_state(capsys):
    assert main() == 0
    assert capsys.readouterr().out == (
        "ConcreteStateA handles the request.\n"
        "Context: Transition to ConcreteStateB.\n"
        "ConcreteStateB handles the request.\n"
    )