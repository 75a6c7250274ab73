"""Proxy: a stand-in that creates the real subject lazily and wraps access."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(line: str) -> str:
    """Print a line and hand it back to the caller."""
    print(line)
    return line


class Subject(ABC):
    """The interface shared by the real subject and its proxy."""

    @abstractmethod
    def request(self) -> list[str]:
        """Serve a request and return the lines it produced."""


class RealSubject(Subject):
    def request(self) -> list[str]:
        return [_emit("RealSubject: Handling request.")]


class Proxy(Subject):
    """Checks access, forwards to the real subject, then logs the access."""

    def __init__(self, real_subject: RealSubject | None = None) -> None:
        self._real_subject = real_subject

    def request(self) -> list[str]:
        if self._real_subject is None:
            self._real_subject = RealSubject()
        lines = [self._check_access()]
        lines.extend(self._real_subject.request())
        lines.append(self._log_access())
        return lines

    def _check_access(self) -> str:
        return _emit("Proxy: Checking access prior to firing a real request.")

    def _log_access(self) -> str:
        return _emit("Proxy: Logging the time of request.")


def main(argv: list[str] | None = None) -> int:
    """Make one request through a proxy."""
    subject: Subject = Proxy()
    subject.request()
    return 0