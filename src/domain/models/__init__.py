"""Domain models package."""

from .homework import MathHomework
from .operation import U64_MAX, Operation
from .result import HomeworkResult

__all__ = [
    "HomeworkResult",
    "MathHomework",
    "Operation",
    "U64_MAX",
]
