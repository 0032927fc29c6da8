from datetime import datetime

from src.salary_processor.salary_processor.core.enums import CellType
from src.salary_processor.salary_processor.spreadsheet.model import SheetCell, row_of
from src.salary_processor.salary_processor.spreadsheet.text import cell_text, row_text


def test_cell_text_per_type():
    assert cell_text(SheetCell(CellType.TEXT, "Present:")) == "Present:"
    assert cell_text(SheetCell(CellType.NUMERIC, 22.0)) == "22"
    assert cell_text(SheetCell(CellType.NUMERIC, 2.5)) == "2.5"
    assert cell_text(SheetCell(CellType.BOOLEAN, True)) == "true"
    assert cell_text(SheetCell(CellType.DATE, datetime(2025, 6, 1, 9, 30))) == "2025-06-01T09:30:00"
    assert cell_text(SheetCell(CellType.BLANK)) == ""
    assert cell_text(None) == ""


def test_formula_cells_fall_back_to_numeric_then_error_marker():
    assert cell_text(SheetCell(CellType.FORMULA, "Rahul")) == "Rahul"
    assert cell_text(SheetCell(CellType.FORMULA, 8.0)) == "8"
    assert cell_text(SheetCell(CellType.FORMULA, None)) == "#FORMULA_ERROR#"


def test_row_text_joins_present_cells_and_trims():
    row = row_of("Employee:", 12, ":", "Rahul Sharma")
    assert row_text(row) == "Employee: 12 : Rahul Sharma"
    assert row_text([None, SheetCell(CellType.TEXT, " Present: 3 "), None]) == "Present: 3"


def test_from_value_infers_types():
    assert SheetCell.from_value(False).cell_type == CellType.BOOLEAN
    assert SheetCell.from_value(3).cell_type == CellType.NUMERIC
    assert SheetCell.from_value(datetime(2025, 1, 1)).cell_type == CellType.DATE
    assert SheetCell.from_value("").cell_type == CellType.BLANK
    assert SheetCell.from_value("x").cell_type == CellType.TEXT
