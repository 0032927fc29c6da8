from __future__ import annotations

import io
import logging
import struct
from pathlib import Path
from typing import Any, BinaryIO, Union
from zipfile import BadZipFile

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd.compdoc import CompDocError

from ..core.enums import CellType
from ..core.exceptions import SpreadsheetReadError
from .model import SheetCell, SheetRows

logger = logging.getLogger(__name__)

WorkbookSource = Union[str, Path, bytes, BinaryIO]

# Legacy .xls workbooks are OLE2 compound documents; .xlsx is a zip container.
OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

_READ_ERRORS = (
    InvalidFileException,
    BadZipFile,
    xlrd.XLRDError,
    CompDocError,
    struct.error,
    KeyError,
    OSError,
    ValueError,
    TypeError,
)


def _read_bytes(source: WorkbookSource) -> bytes:
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    if isinstance(source, bytes):
        return source
    return source.read()


def _to_sheet_cell(cell: Any, cached_value: Any) -> SheetCell:
    value = cell.value
    if value is None or value == "":
        return SheetCell(CellType.BLANK)

    data_type = cell.data_type
    if data_type == "f":
        return SheetCell(CellType.FORMULA, cached_value)
    if cell.is_date:
        return SheetCell(CellType.DATE, value)
    if data_type == "b":
        return SheetCell(CellType.BOOLEAN, bool(value))
    if data_type == "n":
        return SheetCell(CellType.NUMERIC, value)
    return SheetCell(CellType.TEXT, str(value))


def _xls_to_sheet_cell(cell: Any, datemode: int) -> SheetCell:
    # xlrd only exposes cached formula results, so formulas arrive as plain values.
    ctype = cell.ctype
    if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK) or cell.value == "":
        return SheetCell(CellType.BLANK)
    if ctype == xlrd.XL_CELL_TEXT:
        return SheetCell(CellType.TEXT, cell.value)
    if ctype == xlrd.XL_CELL_NUMBER:
        return SheetCell(CellType.NUMERIC, cell.value)
    if ctype == xlrd.XL_CELL_DATE:
        return SheetCell(CellType.DATE, xlrd.xldate_as_datetime(cell.value, datemode))
    if ctype == xlrd.XL_CELL_BOOLEAN:
        return SheetCell(CellType.BOOLEAN, bool(cell.value))
    # XL_CELL_ERROR: an errored formula result.
    return SheetCell(CellType.FORMULA, None)


def _read_xlsx(content: bytes) -> list[SheetRows]:
    # Opened twice: once for formulas, once for their cached values.
    buffer = io.BytesIO(content)
    try:
        formulas_wb = openpyxl.load_workbook(buffer, data_only=False)
        buffer.seek(0)
        values_wb = openpyxl.load_workbook(buffer, data_only=True)
    except _READ_ERRORS as exc:
        raise SpreadsheetReadError(f"Cannot read spreadsheet: {exc}") from exc

    sheets: list[SheetRows] = []
    try:
        for ws in formulas_wb.worksheets:
            values_ws = values_wb[ws.title]
            logger.info("Processing sheet: %s", ws.title)

            rows = []
            for cells, cached in zip(ws.iter_rows(), values_ws.iter_rows(values_only=True)):
                rows.append([_to_sheet_cell(cell, value) for cell, value in zip(cells, cached)])
            sheets.append(SheetRows(name=ws.title, rows=rows))
    finally:
        formulas_wb.close()
        values_wb.close()
    return sheets


def _read_xls(content: bytes) -> list[SheetRows]:
    try:
        book = xlrd.open_workbook(file_contents=content)
    except _READ_ERRORS as exc:
        raise SpreadsheetReadError(f"Cannot read spreadsheet: {exc}") from exc

    sheets: list[SheetRows] = []
    try:
        for sheet in book.sheets():
            logger.info("Processing sheet: %s", sheet.name)
            rows = [
                [_xls_to_sheet_cell(cell, book.datemode) for cell in sheet.row(index)]
                for index in range(sheet.nrows)
            ]
            sheets.append(SheetRows(name=sheet.name, rows=rows))
    finally:
        book.release_resources()
    return sheets


def read_workbook(source: WorkbookSource) -> list[SheetRows]:
    """Read every worksheet of a workbook into typed rows.

    Both .xlsx (openpyxl) and legacy .xls (xlrd) are accepted; the format is
    taken from the file signature, not the file name.

    Raises SpreadsheetReadError when the container cannot be opened.
    """

    try:
        content = _read_bytes(source)
    except OSError as exc:
        raise SpreadsheetReadError(f"Cannot read spreadsheet: {exc}") from exc

    if content.startswith(OLE2_SIGNATURE):
        sheets = _read_xls(content)
    else:
        sheets = _read_xlsx(content)

    logger.info("Read %d sheet(s) from workbook", len(sheets))
    return sheets
