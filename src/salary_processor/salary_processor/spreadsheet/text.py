from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional

from ..core.constants import FORMULA_ERROR_TEXT
from ..core.enums import CellType
from .model import SheetCell, SheetRow


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def format_number(value: Any) -> str:
    """Integral numbers lose their decimal part (12.0 -> "12")."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def cell_text(cell: Optional[SheetCell]) -> str:
    if cell is None:
        return ""

    value = cell.value
    if cell.cell_type == CellType.TEXT:
        return "" if value is None else str(value)

    if cell.cell_type == CellType.NUMERIC:
        return format_number(value) if _is_number(value) else ""

    if cell.cell_type == CellType.BOOLEAN:
        return "true" if value else "false"

    if cell.cell_type == CellType.DATE:
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        return "" if value is None else str(value)

    if cell.cell_type == CellType.FORMULA:
        if isinstance(value, str):
            return value
        if _is_number(value):
            return format_number(value)
        return FORMULA_ERROR_TEXT

    return ""


def row_text(row: SheetRow) -> str:
    """Concatenate the text of every present cell, space separated and trimmed."""
    return " ".join(cell_text(cell) for cell in row if cell is not None).strip()
