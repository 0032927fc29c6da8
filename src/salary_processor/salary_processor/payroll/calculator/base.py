from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...attendance.model import AttendanceSummary
from ...directory.model import EmployeeRecord
from ..model import SalaryResult


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def late_mark_penalty(self, monthly_salary: Decimal, late_marks: int) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def calculate(self, summary: AttendanceSummary, employee: EmployeeRecord, *, total_working_days: int) -> SalaryResult:
        raise NotImplementedError
