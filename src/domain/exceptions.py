"""Exceptions raised while solving math homework."""


class HomeworkError(Exception):
    """Base error for the homework solver."""

    pass


class GridParsingError(HomeworkError, ValueError):
    """Input text does not match the homework grammar."""

    pass


class ShapeValidationError(HomeworkError, ValueError):
    """Parsed rows disagree in length with the operator line."""

    def __init__(self, message: str, *, row: int, length: int, expected: int):
        super().__init__(message)
        self.row = row
        self.length = length
        self.expected = expected


class TranscodeError(HomeworkError, ValueError):
    """Input cannot be re-flowed into the column-wise layout."""

    pass


class HomeworkStateError(HomeworkError):
    """Homework was used out of order (e.g. solved twice)."""

    pass


class InputSourceError(HomeworkError):
    """Input resource could not be read."""

    pass
