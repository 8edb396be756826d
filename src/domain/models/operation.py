"""Arithmetic operations applied to homework columns."""

from enum import Enum

U64_MAX = 2**64 - 1


class Operation(Enum):
    """Operator assigned to a single homework column."""

    ADDITION = "+"
    MULTIPLICATION = "*"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operation":
        """Look up an operation by its display symbol."""
        return cls(symbol)

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def identity(self) -> int:
        """Starting value of a fold, also used as a placeholder operand."""
        return 0 if self is Operation.ADDITION else 1

    def apply(self, acc: int, value: int) -> int:
        if self is Operation.ADDITION:
            return acc + value
        return acc * value

    def __str__(self) -> str:
        return self.value
