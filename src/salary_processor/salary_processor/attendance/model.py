from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    """Per-employee attendance summary extracted from one export.

    Durations are in the export's "hours.minutes" notation (128:37 -> 128.37).
    """

    employee_id: str
    employee_name: str
    record_date: date
    hours_worked: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")
    present_days: int = 0
    absent_days: int = 0
    weekly_off_days: int = 0
    late_hours: Decimal = Decimal("0")
    late_days: int = 0
    status: AttendanceStatus = AttendanceStatus.ABSENT

    @property
    def is_late(self) -> bool:
        return self.late_days > 0

    @property
    def total_hours(self) -> Decimal:
        return self.hours_worked + self.overtime_hours
