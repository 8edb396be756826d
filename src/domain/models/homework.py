"""Parsed homework grid and its column folds."""

from dataclasses import dataclass, field

from loguru import logger

from domain.exceptions import HomeworkStateError, ShapeValidationError

from .operation import U64_MAX, Operation


def wrap_u64(value: int) -> int:
    """Reduce a value to unsigned 64-bit range, logging when it wraps."""
    if value > U64_MAX:
        logger.warning(f"Value {value} overflows 64 bits, wrapping")
        return value & U64_MAX
    return value


@dataclass
class MathHomework:
    """
    Rows of operands plus one operator per column.

    `answers` stays empty until `solve()` folds every column.
    """

    inputs: list[list[int]]
    operators: list[Operation]
    answers: list[int] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.operators)

    def validate(self) -> None:
        """Check that every row has exactly one operand per operator."""
        for index, row in enumerate(self.inputs):
            if len(row) != self.column_count:
                logger.error(
                    f"Row {index} has {len(row)} operands, expected {self.column_count}"
                )
                raise ShapeValidationError(
                    "input lines were of different lengths, bad input.",
                    row=index,
                    length=len(row),
                    expected=self.column_count,
                )

    def solve(self) -> list[int]:
        """Fold each column under its operator and store the answers."""
        if self.answers:
            raise HomeworkStateError("homework has already been solved")

        self.validate()

        for pos, operator in enumerate(self.operators):
            acc = operator.identity
            for row in self.inputs:
                acc = wrap_u64(operator.apply(acc, row[pos]))
            self.answers.append(acc)

        logger.debug(f"Solved {self.column_count} columns")
        return self.answers

    @property
    def total(self) -> int:
        """Sum of all column answers."""
        if len(self.answers) != self.column_count:
            raise HomeworkStateError("homework has not been solved yet")
        return wrap_u64(sum(self.answers))

    def column(self, pos: int) -> list[int]:
        return [row[pos] for row in self.inputs]

    def format_report(self) -> str:
        """
        Render every column as `a op b op c = answer`, one line per column.
        """
        if len(self.answers) != self.column_count:
            raise HomeworkStateError("homework has not been solved yet")

        lines = []
        for pos, operator in enumerate(self.operators):
            expression = f" {operator.symbol} ".join(str(v) for v in self.column(pos))
            lines.append(f"{expression} = {self.answers[pos]}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_report()
