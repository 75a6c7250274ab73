"""Adapter: make an existing class usable through a different interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Target(ABC):
    """The interface clients expect."""

    @abstractmethod
    def request(self) -> object:
        """Serve a client request."""


class Adaptee:
    """An existing class with an incompatible interface."""

    reply = "Adaptee: Specific Request"

    def specific_request(self) -> str:
        """Print this adaptee's reply and return it."""
        print(self.reply)
        return self.reply


class Adapter(Target):
    """Presents an Adaptee through the Target interface."""

    def __init__(self, adaptee: Adaptee) -> None:
        self.adaptee = adaptee

    def request(self) -> object:
        return self.adaptee.specific_request()


def main(argv: list[str] | None = None) -> int:
    """Call the adaptee through the target interface."""
    target: Target = Adapter(Adaptee())
    target.request()
    return 0