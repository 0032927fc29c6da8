from __future__ import annotations

import logging
from decimal import Decimal

from ...attendance.model import AttendanceSummary
from ...core.constants import (
    FORGIVEN_LATE_MARKS,
    HOURS_PER_DAY,
    PENALTY_MONTH_DAYS,
    PENALTY_THRESHOLD_LATE_MARKS,
)
from ...directory.model import EmployeeRecord
from ..model import SalaryResult
from .base import SalaryCalculator

logger = logging.getLogger(__name__)


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: salary x (worked / expected hours) minus a tiered late-mark penalty.

    Worked hours include overtime and the ratio is not capped, so overtime can
    push the payable amount above the monthly salary.

    Late marks, priced against a 30-day month whatever the billing period:
    - first two are forgiven
    - the third costs half a day's salary
    - every further mark costs a third of that half day
    """

    def late_mark_penalty(self, monthly_salary: Decimal, late_marks: int) -> Decimal:
        if late_marks <= FORGIVEN_LATE_MARKS:
            return Decimal("0")

        half_day_salary = monthly_salary / PENALTY_MONTH_DAYS / 2
        extra_marks = late_marks - PENALTY_THRESHOLD_LATE_MARKS
        return half_day_salary + (half_day_salary / 3) * extra_marks

    def calculate(self, summary: AttendanceSummary, employee: EmployeeRecord, *, total_working_days: int) -> SalaryResult:
        actual_hours = summary.total_hours
        expected_hours = HOURS_PER_DAY * total_working_days
        coefficient = actual_hours / expected_hours

        late_marks = summary.late_days
        penalty = self.late_mark_penalty(employee.monthly_salary, late_marks)
        final_salary = employee.monthly_salary * coefficient - penalty

        logger.info(
            "Employee %s: %s hours / %s expected = ratio %s, penalty %s for %d late marks",
            summary.employee_id,
            actual_hours,
            expected_hours,
            coefficient,
            penalty,
            late_marks,
        )
        return SalaryResult(
            employee_id=summary.employee_id,
            employee_name=employee.name,
            monthly_salary=employee.monthly_salary,
            expected_hours=expected_hours,
            actual_worked_hours=actual_hours,
            coefficient=coefficient,
            final_payable_salary=final_salary,
            late_marks=late_marks,
            late_mark_penalty=penalty,
        )
