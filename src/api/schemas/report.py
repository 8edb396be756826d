"""Pydantic schemas for machine-readable homework reports."""

from pydantic import BaseModel

from domain.models import HomeworkResult, MathHomework


class ColumnReport(BaseModel):
    """One folded column."""

    operator: str  # "+" or "*"
    operands: list[int]
    result: int


class PartReport(BaseModel):
    """All columns of one reading of the homework."""

    columns: list[ColumnReport]
    total: int

    @classmethod
    def from_homework(cls, homework: MathHomework) -> "PartReport":
        columns = [
            ColumnReport(
                operator=operator.symbol,
                operands=homework.column(pos),
                result=homework.answers[pos],
            )
            for pos, operator in enumerate(homework.operators)
        ]
        return cls(columns=columns, total=homework.total)


class HomeworkReport(BaseModel):
    """Response containing both parts of the solved homework."""

    part1: PartReport
    part2: PartReport

    @classmethod
    def from_result(cls, result: HomeworkResult) -> "HomeworkReport":
        return cls(
            part1=PartReport.from_homework(result.part1),
            part2=PartReport.from_homework(result.part2),
        )
