"""Command: requests wrapped as objects that can be run and undone."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Command(ABC):
    """An action that can be executed and undone."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the action."""


class Receiver:
    """The object that actually does the work."""

    def perform_action(self, action: str) -> None:
        print(f"Receiver: Performing {action}")

    def undo_action(self, action: str) -> None:
        print(f"Receiver: Undoing {action}")


@dataclass
class ConcreteCommand(Command):
    """Binds a named action to a receiver."""

    receiver: Receiver
    action: str

    def execute(self) -> None:
        self.receiver.perform_action(self.action)

    def undo(self) -> None:
        self.receiver.undo_action(self.action)


@dataclass
class Invoker:
    """Queues commands and runs or undoes them in a batch."""

    commands: list[Command] = field(default_factory=list)

    def add_command(self, command: Command) -> None:
        self.commands.append(command)

    def execute_commands(self) -> list[Command]:
        """Execute queued commands in order, then empty the queue."""
        run = list(self.commands)
        for command in run:
            command.execute()
        self.commands.clear()
        return run

    def undo_commands(self) -> list[Command]:
        """Undo queued commands newest first, then empty the queue."""
        run = list(reversed(self.commands))
        for command in run:
            command.undo()
        self.commands.clear()
        return run


def main(argv: list[str] | None = None) -> int:
    """Queue two commands, execute them, then undo what is left queued."""
    receiver = Receiver()
    invoker = Invoker()
    invoker.add_command(ConcreteCommand(receiver, "Action1"))
    invoker.add_command(ConcreteCommand(receiver, "Action2"))
    invoker.execute_commands()
    invoker.undo_commands()
    return 0