"""Service for solving homework in both layouts."""

from pathlib import Path

from loguru import logger

from domain.models import HomeworkResult, MathHomework
from infrastructure.input_source import read_input
from infrastructure.parsers import (
    GridParser,
    GridParserProtocol,
    ReflowTranscoder,
    TranscoderProtocol,
)


class HomeworkService:
    """Runs the parse, validate, solve pipeline over homework text."""

    def __init__(
        self,
        *,
        grid_parser: type[GridParserProtocol] = GridParser,
        transcoder: TranscoderProtocol | None = None,
    ):
        """Initialize service with dependencies."""
        self.grid_parser = grid_parser
        self.transcoder = transcoder or ReflowTranscoder(grid_parser)

    def do_homework(self, text: str) -> MathHomework:
        """Parse, validate and solve a single homework text."""
        homework = self.grid_parser.parse(text)
        homework.validate()
        homework.solve()

        logger.info(f"Homework total: {homework.total}")
        return homework

    def solve_parts(self, text: str) -> HomeworkResult:
        """
        Solve the homework as written and in its re-flowed layout.

        The input is re-flowed before anything is parsed, so an empty input
        fails without reaching the grid parser.
        """
        logger.info("Step 1: Re-flowing input for part 2")
        translated = self.transcoder.translate(text)

        logger.info("Step 2: Solving part 1")
        part1 = self.do_homework(text)

        logger.info("Step 3: Solving part 2")
        part2 = self.do_homework(translated)

        return HomeworkResult(part1=part1, part2=part2)

    def solve_file(self, path: str | Path) -> HomeworkResult:
        """Read homework from a file (or "-" for stdin) and solve both parts."""
        logger.info(f"Solving homework from: {path}")
        return self.solve_parts(read_input(path))
