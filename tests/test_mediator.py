import pytest

from patternkit.mediator import (
    Colleague,
    ConcreteColleagueA,
    ConcreteColleagueB,
    ConcreteMediator,
    main,
)


@pytest.fixture
def pair():
    mediator = ConcreteMediator()
    a = ConcreteColleagueA(mediator)
    b = ConcreteColleagueB(mediator)
    mediator.colleague_a = a
    mediator.colleague_b = b
    return mediator, a, b


def test_a_reaches_b(pair, capsys):
    _, a, _ = pair
    a.send("ping")
    assert capsys.readouterr().out == "Colleague B received: ping\n"


def test_b_reaches_a(pair, capsys):
    _, _, b = pair
    b.send("pong")
    assert capsys.readouterr().out == "Colleague A received: pong\n"


def test_unknown_sender_is_ignored(pair, capsys):
    mediator, _, _ = pair
    stranger = ConcreteColleagueA(mediator)
    stranger.send("hello")
    assert capsys.readouterr().out == ""


def test_missing_receiver_raises():
    mediator = ConcreteMediator()
    a = ConcreteColleagueA(mediator)
    mediator.colleague_a = a
    with pytest.raises(RuntimeError):
        a.send("hello")


def test_colleague_is_abstract():
    with pytest.raises(TypeError):
        Colleague(ConcreteMediator())


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Colleague B received: Hello from Colleague A",
        "Colleague A received: Hello from Colleague B",
    ]