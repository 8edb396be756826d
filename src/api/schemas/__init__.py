from .report import ColumnReport, HomeworkReport, PartReport

__all__ = ["ColumnReport", "HomeworkReport", "PartReport"]
