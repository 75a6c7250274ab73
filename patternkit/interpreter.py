"""Interpreter: a tiny arithmetic expression tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Expression(ABC):
    """A node that evaluates to an integer."""

    @abstractmethod
    def interpret(self) -> int:
        """Evaluate the expression."""


@dataclass(frozen=True)
class NumberExpression(Expression):
    """A literal integer."""

    number: int

    def interpret(self) -> int:
        return self.number


@dataclass(frozen=True)
class _BinaryExpression(Expression):
    """A node combining a left and a right sub-expression."""

    left: Expression
    right: Expression


class AddExpression(_BinaryExpression):
    """The sum of two expressions."""

    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


class SubtractExpression(_BinaryExpression):
    """The difference of two expressions."""

    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


def main(argv: list[str] | None = None) -> int:
    """Evaluate (1 + 2) - 3 and print the result."""
    sum_node = AddExpression(NumberExpression(1), NumberExpression(2))
    tree = SubtractExpression(sum_node, NumberExpression(3))
    print(f"Result: {tree.interpret()}")
    return 0