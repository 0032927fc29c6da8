from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..core.enums import CellType


@dataclass(frozen=True)
class SheetCell:
    """A single spreadsheet cell: semantic type plus raw value.

    For FORMULA cells ``value`` holds the cached result of the formula.
    """

    cell_type: CellType
    value: Any = None

    @classmethod
    def from_value(cls, value: Any) -> "SheetCell":
        if value is None or value == "":
            return cls(CellType.BLANK)
        if isinstance(value, bool):
            return cls(CellType.BOOLEAN, value)
        if isinstance(value, (int, float, Decimal)):
            return cls(CellType.NUMERIC, value)
        if isinstance(value, (datetime, date, time)):
            return cls(CellType.DATE, value)
        return cls(CellType.TEXT, str(value))


SheetRow = Sequence[Optional[SheetCell]]


@dataclass(frozen=True)
class SheetRows:
    """All rows of one worksheet, in sheet order."""

    name: str
    rows: Sequence[SheetRow]


def row_of(*values: Any) -> list[SheetCell]:
    """Build a row from plain Python values (type inferred per value)."""
    return [SheetCell.from_value(v) for v in values]
