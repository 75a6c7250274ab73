"""Mediator: two colleagues talk only through a go-between."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Colleague(ABC):
    """A participant that sends messages through a mediator."""

    def __init__(self, mediator: ConcreteMediator) -> None:
        self.mediator = mediator

    def send(self, message: str) -> None:
        self.mediator.send_message(message, self)

    @abstractmethod
    def receive(self, message: str) -> None:
        """Accept a message forwarded by the mediator."""


class ConcreteColleagueA(Colleague):
    def receive(self, message: str) -> None:
        print(f"Colleague A received: {message}")


class ConcreteColleagueB(Colleague):
    def receive(self, message: str) -> None:
        print(f"Colleague B received: {message}")


class ConcreteMediator:
    """Forwards a message from one colleague to the other."""

    def __init__(
        self,
        colleague_a: ConcreteColleagueA | None = None,
        colleague_b: ConcreteColleagueB | None = None,
    ) -> None:
        self.colleague_a = colleague_a
        self.colleague_b = colleague_b

    def send_message(self, message: str, colleague: Colleague) -> None:
        """Deliver the message to the colleague opposite the sender."""
        if colleague is self.colleague_a:
            target = self.colleague_b
        elif colleague is self.colleague_b:
            target = self.colleague_a
        else:
            return
        if target is None:
            raise RuntimeError("no colleague registered to receive the message")
        target.receive(message)


def main(argv: list[str] | None = None) -> int:
    """Let two colleagues greet each other through a mediator."""
    mediator = ConcreteMediator()
    colleague_a = ConcreteColleagueA(mediator)
    colleague_b = ConcreteColleagueB(mediator)
    mediator.colleague_a = colleague_a
    mediator.colleague_b = colleague_b
    colleague_a.send("Hello from Colleague A")
    colleague_b.send("Hello from Colleague B")
    return 0