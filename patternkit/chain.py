"""Chain of responsibility: handlers pass requests along until one accepts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Handler(ABC):
    """A link in a chain of handlers."""

    def __init__(self, next_handler: Handler | None = None) -> None:
        self.next_handler = next_handler

    def set_next(self, handler: Handler | None) -> Handler | None:
        """Set the handler that receives requests this one declines."""
        self.next_handler = handler
        return handler

    @abstractmethod
    def can_handle(self, request: int) -> bool:
        """Return True if this handler accepts the request."""

    def handle_request(self, request: int) -> Handler | None:
        """Handle the request here or pass it on; return the handler that took it."""
        if self.can_handle(request):
            print(f"{type(self).__name__} handled request {request}")
            return self
        if self.next_handler is not None:
            return self.next_handler.handle_request(request)
        return None


class ConcreteHandlerA(Handler):
    """Accepts requests in the range [0, 10)."""

    def can_handle(self, request: int) -> bool:
        return 0 <= request < 10


class ConcreteHandlerB(Handler):
    """Accepts requests in the range [10, 20)."""

    def can_handle(self, request: int) -> bool:
        return 10 <= request < 20


def main(argv: list[str] | None = None) -> int:
    """Send a few requests through a two-link chain."""
    handler_a = ConcreteHandlerA()
    handler_a.set_next(ConcreteHandlerB())
    for request in (5, 15, 25):
        handler_a.handle_request(request)
    return 0