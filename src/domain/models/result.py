"""Value objects for solved homework."""

from dataclasses import dataclass

from .homework import MathHomework


@dataclass
class HomeworkResult:
    """Both solved readings of the same homework input."""

    part1: MathHomework
    part2: MathHomework

    @property
    def part1_total(self) -> int:
        return self.part1.total

    @property
    def part2_total(self) -> int:
        return self.part2.total
