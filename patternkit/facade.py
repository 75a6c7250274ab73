"""Facade: one simple entry point over several subsystems."""

from __future__ import annotations


class SubsystemA:
    def operation_a(self) -> None:
        print("SubsystemA: Operation A")


class SubsystemB:
    def operation_b(self) -> None:
        print("SubsystemB: Operation B")


class SubsystemC:
    def operation_c(self) -> None:
        print("SubsystemC: Operation C")


class Facade:
    """Drives subsystems A, B and C in that order."""

    def __init__(
        self,
        subsystem_a: SubsystemA | None = None,
        subsystem_b: SubsystemB | None = None,
        subsystem_c: SubsystemC | None = None,
    ) -> None:
        self.subsystem_a = subsystem_a if subsystem_a is not None else SubsystemA()
        self.subsystem_b = subsystem_b if subsystem_b is not None else SubsystemB()
        self.subsystem_c = subsystem_c if subsystem_c is not None else SubsystemC()

    def operation(self) -> None:
        self.subsystem_a.operation_a()
        self.subsystem_b.operation_b()
        self.subsystem_c.operation_c()


def main(argv: list[str] | None = None) -> int:
    """Run the facade's single operation."""
    Facade().operation()
    return 0