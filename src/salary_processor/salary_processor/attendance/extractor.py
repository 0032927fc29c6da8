from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.constants import EMPLOYEE_MARKER, FALLBACK_HOURS_WORKED
from ..core.enums import AttendanceStatus, CellType
from ..spreadsheet.model import SheetRow, SheetRows
from ..spreadsheet.text import cell_text, row_text
from .model import AttendanceSummary
from .patterns import (
    ABSENT_PATTERN,
    LATE_DAYS_PATTERN,
    LATE_HRS_PATTERN,
    OT_PATTERN,
    PRESENT_PATTERN,
    WEEKLY_OFF_PATTERN,
    WORK_DURATION_PATTERN,
    clean_name,
    is_noise_name,
    match_identity,
    search_count,
    search_duration,
)

logger = logging.getLogger(__name__)

SummaryMap = dict[str, AttendanceSummary]


def _row_date(row: SheetRow) -> Optional[date]:
    found = None
    for cell in row:
        if cell is None or cell.cell_type != CellType.DATE:
            continue
        if isinstance(cell.value, datetime):
            found = cell.value.date()
        elif isinstance(cell.value, date):
            found = cell.value
    return found


class AttendanceExtractor:
    """Turns attendance export rows into one summary per employee.

    Rows carrying the ``Employee:`` marker hold the summary; its metrics may
    spill onto the following row. Later rows for the same id win.
    """

    def __init__(self, *, clock: Optional[Callable[[], date]] = None):
        self._today = clock or today_local

    def extract(self, rows: Sequence[SheetRow]) -> SummaryMap:
        records: SummaryMap = {}
        self._scan_markers(rows, records)
        if not records:
            logger.warning("No employee rows found, trying colon pattern fallback")
            records = self.fallback_scan(rows)
        return records

    def extract_sheets(self, sheets: Sequence[SheetRows]) -> SummaryMap:
        records: SummaryMap = {}
        for sheet in sheets:
            logger.info("Scanning sheet: %s", sheet.name)
            self._scan_markers(sheet.rows, records)
        logger.info("Finished parsing. Found %d valid employees.", len(records))

        if not records and sheets:
            logger.warning("No employee rows found, trying colon pattern fallback on sheet %s", sheets[0].name)
            records = self.fallback_scan(sheets[0].rows)
        return records

    def _scan_markers(self, rows: Sequence[SheetRow], records: SummaryMap) -> None:
        texts = [row_text(row) for row in rows]
        for index, text in enumerate(texts):
            logger.debug("Raw row content: %s", text)
            if EMPLOYEE_MARKER not in text:
                continue

            logger.info("Found Employee row: %s", text)
            next_text = texts[index + 1] if index + 1 < len(texts) else None
            summary = self.summarize_row(text, next_text)
            if summary is not None:
                records[summary.employee_id] = summary

    def summarize_row(self, text: str, next_text: Optional[str] = None) -> Optional[AttendanceSummary]:
        identity = match_identity(text)
        if identity is None:
            logger.warning("Failed to extract employee data from row: %s", text)
            return None

        employee_id, raw_name = identity
        employee_name = clean_name(raw_name)
        if not employee_name:
            logger.warning("Empty employee name in row: %s", text)
            return None
        if is_noise_name(employee_name):
            logger.info("Skipping test employee: %s", employee_name)
            return None

        summary_text = text if next_text is None else f"{text} {next_text}"
        present_days = search_count(summary_text, PRESENT_PATTERN)
        summary = AttendanceSummary(
            employee_id=employee_id,
            employee_name=employee_name,
            record_date=self._today(),
            hours_worked=search_duration(summary_text, WORK_DURATION_PATTERN),
            overtime_hours=search_duration(summary_text, OT_PATTERN),
            present_days=present_days,
            absent_days=search_count(summary_text, ABSENT_PATTERN),
            weekly_off_days=search_count(summary_text, WEEKLY_OFF_PATTERN),
            late_hours=search_duration(summary_text, LATE_HRS_PATTERN),
            late_days=search_count(summary_text, LATE_DAYS_PATTERN),
            status=AttendanceStatus.PRESENT if present_days > 0 else AttendanceStatus.ABSENT,
        )
        logger.info(
            "Employee metrics - ID: %s, Name: %s, Work Hours: %s, OT: %s, Present: %s, Absent: %s, "
            "WeeklyOff: %s, Late Hrs: %s, Late Days: %s",
            summary.employee_id,
            summary.employee_name,
            summary.hours_worked,
            summary.overtime_hours,
            summary.present_days,
            summary.absent_days,
            summary.weekly_off_days,
            summary.late_hours,
            summary.late_days,
        )
        return summary

    def fallback_scan(self, rows: Iterable[SheetRow]) -> SummaryMap:
        """Degraded recovery for exports without marker rows.

        Any non-date cell shaped like ``id : name`` becomes a present employee
        with a default 8-hour day.
        """

        records: SummaryMap = {}
        for row in rows:
            record_date = _row_date(row) or self._today()
            for cell in row:
                if cell is None or cell.cell_type == CellType.DATE:
                    continue
                text = cell_text(cell)
                if ":" not in text or EMPLOYEE_MARKER in text:
                    continue

                employee_id, _, employee_name = text.partition(":")
                employee_id = employee_id.strip()
                employee_name = employee_name.strip()
                if not employee_id or not employee_name:
                    logger.warning("Skipping colon cell without id or name: %s", text)
                    continue

                records[employee_id] = AttendanceSummary(
                    employee_id=employee_id,
                    employee_name=employee_name,
                    record_date=record_date,
                    hours_worked=FALLBACK_HOURS_WORKED,
                    status=AttendanceStatus.PRESENT,
                )
                logger.info("Fallback record for employee ID: %s (%s)", employee_id, employee_name)

        logger.info("Found %d employees with the colon pattern", len(records))
        return records
