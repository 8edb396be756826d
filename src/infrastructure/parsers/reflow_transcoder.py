"""Transcoder that rebuilds homework operands written vertically."""

from dataclasses import dataclass, field

from loguru import logger

from domain.exceptions import GridParsingError, TranscodeError
from domain.models import Operation

from .grid_parser import GridParser
from .interfaces import GridParserProtocol, TranscoderProtocol


@dataclass
class _ReflowState:
    """Scan cursor: current operator column and next output row."""

    operators: list[Operation]
    tokens: list[list[str]]
    column: int = 0
    row: int = 0
    filled: int = field(default=0, init=False)

    @property
    def row_count(self) -> int:
        return len(self.tokens)

    def push(self, token: str) -> None:
        if self.row >= self.row_count:
            raise TranscodeError(
                f"Column {self.column} needs more than {self.row_count} operands"
            )
        self.tokens[self.row].append(token)
        self.row += 1

    def close_column(self) -> None:
        """Pad unfilled rows of the current column with its identity."""
        if self.row == 0 and self.column >= len(self.operators):
            # blank slices past the last operator column carry no operands
            return
        if self.row < self.row_count:
            if self.column >= len(self.operators):
                raise TranscodeError(
                    f"Found operand column {self.column} but only "
                    f"{len(self.operators)} operators"
                )
            identity = str(self.operators[self.column].identity)
            while self.row < self.row_count:
                self.tokens[self.row].append(identity)
                self.row += 1
                self.filled += 1

    def next_column(self) -> None:
        self.close_column()
        self.column += 1
        self.row = 0


class ReflowTranscoder(TranscoderProtocol):
    """
    Rewrites homework whose operands are written top-to-bottom, one digit per
    line, into the row layout understood by `GridParser`.

    The last line holds the operators. Every character position of the other
    lines forms a vertical slice; a non-blank slice is one operand of the
    current column, a blank slice closes the column. Rows a column leaves
    empty are padded with that operator's identity, so the fold is unchanged.
    """

    def __init__(self, grid_parser: type[GridParserProtocol] = GridParser):
        """
        Initialize transcoder.

        Args:
            grid_parser: Parser used to read the operator line
        """
        self.grid_parser = grid_parser

    def translate(self, text: str) -> str:
        """
        Return the re-flowed homework text.
        """
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        if lines[-1] == "":
            lines.pop()
        if not lines:
            raise TranscodeError("input was empty")

        operator_line = lines.pop()
        try:
            operators = self.grid_parser.parse_operators(operator_line)
        except GridParsingError as e:
            raise TranscodeError(f"Last line is not a valid operator line: {e}") from e

        width = len(operator_line)
        # shorter lines are padded so every slice has one char per row
        grid = [line.ljust(width) for line in lines]
        logger.debug(
            f"Re-flowing {len(grid)} rows x {width} chars for {len(operators)} operators"
        )

        state = _ReflowState(operators=operators, tokens=[[] for _ in grid])
        for pos in range(width):
            slice_ = "".join(line[pos] for line in grid)
            if slice_.strip():
                state.push(slice_)
            else:
                state.next_column()
        state.close_column()

        if state.filled:
            logger.debug(f"Padded {state.filled} empty slots with identity values")

        rows = "\n".join(" ".join(tokens) for tokens in state.tokens)
        return f"{rows}\n{operator_line}"
