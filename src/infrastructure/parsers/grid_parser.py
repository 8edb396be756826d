"""Parser for homework text: numeric rows followed by operators."""

import re

from loguru import logger

from domain.exceptions import GridParsingError
from domain.models import U64_MAX, MathHomework, Operation

from .interfaces import GridParserProtocol


class GridParser(GridParserProtocol):
    """
    Parser for the homework grammar:

        puzzle   := row+ operator+
        row      := (ws* number)+ ws*
        operator := ws* ("+" | "*") ws*

    Inside a row only spaces and tabs separate numbers; a newline ends it.
    The whole text must be consumed.
    """

    NUMBER_PATTERN = re.compile(r"[ \t]*([0-9]+)")
    OPERATOR_PATTERN = re.compile(r"[ \t]*([+*])")
    WHITESPACE_PATTERN = re.compile(r"[ \t\r\n]*")

    @classmethod
    def parse(cls, text: str) -> MathHomework:
        """
        Parse homework text into rows and operators.
        """
        logger.debug(f"Parsing homework grid ({len(text)} chars)")

        pos = 0
        inputs: list[list[int]] = []
        while True:
            row, pos = cls._parse_row(text, pos)
            if not row:
                break
            inputs.append(row)

        if not inputs:
            raise GridParsingError(f"Expected a row of numbers at {cls._location(text, pos)}")

        operators, pos = cls._parse_operator_run(text, pos)
        cls._ensure_consumed(text, pos)

        logger.debug(f"Parsed {len(inputs)} rows and {len(operators)} operators")
        return MathHomework(inputs=inputs, operators=operators)

    @classmethod
    def parse_operators(cls, text: str) -> list[Operation]:
        """
        Parse text consisting only of operator symbols.
        """
        operators, pos = cls._parse_operator_run(text, 0)
        cls._ensure_consumed(text, pos)
        return operators

    @classmethod
    def _parse_row(cls, text: str, pos: int) -> tuple[list[int], int]:
        row: list[int] = []
        while match := cls.NUMBER_PATTERN.match(text, pos):
            row.append(cls._to_u64(match.group(1), text, match.start(1)))
            pos = match.end()

        if row:
            pos = cls.WHITESPACE_PATTERN.match(text, pos).end()
        return row, pos

    @classmethod
    def _parse_operator_run(cls, text: str, pos: int) -> tuple[list[Operation], int]:
        operators: list[Operation] = []
        while match := cls.OPERATOR_PATTERN.match(text, pos):
            operators.append(Operation.from_symbol(match.group(1)))
            pos = cls.WHITESPACE_PATTERN.match(text, match.end()).end()

        if not operators:
            raise GridParsingError(
                f"Expected an operator ('+' or '*') at {cls._location(text, pos)}"
            )
        return operators, pos

    @classmethod
    def _to_u64(cls, token: str, text: str, pos: int) -> int:
        digits = token.lstrip("0") or "0"
        # U64_MAX has 20 digits; longer tokens never reach int()
        if len(digits) > 20 or int(digits) > U64_MAX:
            shown = digits if len(digits) <= 24 else f"{digits[:24]}..."
            raise GridParsingError(
                f"Number {shown} at {cls._location(text, pos)} does not fit in 64 bits"
            )
        return int(digits)

    @classmethod
    def _ensure_consumed(cls, text: str, pos: int) -> None:
        if pos < len(text):
            leftover = text[pos : pos + 20]
            raise GridParsingError(
                f"Unexpected trailing input at {cls._location(text, pos)}: {leftover!r}"
            )

    @staticmethod
    def _location(text: str, pos: int) -> str:
        line = text.count("\n", 0, pos) + 1
        column = pos - (text.rfind("\n", 0, pos) + 1) + 1
        return f"line {line}, column {column}"
