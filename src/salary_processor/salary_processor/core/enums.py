from __future__ import annotations

from enum import Enum


class CellType(str, Enum):
    """Semantic type of a spreadsheet cell, independent of the file format."""

    TEXT = "TEXT"
    NUMERIC = "NUMERIC"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    FORMULA = "FORMULA"
    BLANK = "BLANK"


class AttendanceStatus(str, Enum):
    """Overall status of an attendance summary."""

    PRESENT = "P"
    ABSENT = "A"


class DirectoryMode(str, Enum):
    """How the salary computer treats ids missing from the employee directory.

    STRICT drops them, PERMISSIVE synthesizes a placeholder employee.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"
