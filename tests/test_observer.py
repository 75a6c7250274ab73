from patternkit.observer import (
    ConcreteObserverA,
    ConcreteObserverB,
    ConcreteSubject,
    Observer,
    Subject,
)


class Recorder(Observer):
    def __init__(self) -> None:
        self.messages: list[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)


def test_notify_reaches_all_observers_in_order():
    subject = Subject()
    first, second = Recorder(), Recorder()
    subject.add_observer(first)
    subject.add_observer(second)
    subject.notify_observers("hello")
    assert first.messages == ["hello"]
    assert second.messages == ["hello"]
    assert subject.observers == (first, second)


def test_remove_observer_removes_all_registrations():
    subject = Subject()
    recorder = Recorder()
    subject.add_observer(recorder)
    subject.add_observer(recorder)
    subject.remove_observer(recorder)
    subject.notify_observers("x")
    assert recorder.messages == []
    assert subject.observers == ()


def test_remove_unknown_observer_is_ignored():
    subject = Subject()
    recorder = Recorder()
    subject.add_observer(recorder)
    subject.remove_observer(Recorder())
    assert subject.observers == (recorder,)


def test_set_state_updates_and_notifies(capsys):
    subject = ConcreteSubject()
    recorder = Recorder()
    subject.add_observer(recorder)
    subject.set_state("on")
    assert subject.state == "on"
    assert recorder.messages == ["on"]
    assert capsys.readouterr().out == "ConcreteSubject: State changed to on\n"


def test_concrete_observers_print(capsys):
    ConcreteObserverA().update("m")
    ConcreteObserverB().update("m")
    out = capsys.readouterr().out.splitlines()
    assert out == ["ConcreteObserverA received: m", "ConcreteObserverB received: m"]


def test_main_output(capsys):
    from patternkit.observer import main

    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "ConcreteSubject: State changed to State1",
        "ConcreteObserverA received: State1",
        "ConcreteObserverB received: State1",
        "ConcreteSubject: State changed to State2",
        "ConcreteObserverB received: State2",
    ]