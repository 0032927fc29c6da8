from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class SalaryResult:
    """Salary computation for one employee and one billing period.

    ``coefficient`` is the raw worked/expected ratio and may exceed 1.0; the
    late-mark penalty is reported separately from it.
    """

    employee_id: str
    employee_name: str
    monthly_salary: Decimal
    expected_hours: Decimal
    actual_worked_hours: Decimal
    coefficient: Decimal
    final_payable_salary: Decimal
    late_marks: int = 0
    late_mark_penalty: Decimal = Decimal("0")

    @property
    def work_percentage(self) -> Decimal:
        return (self.coefficient * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "monthlySalary": float(self.monthly_salary),
            "expectedHours": float(self.expected_hours),
            "actualWorkedHours": float(self.actual_worked_hours),
            "coefficient": float(self.coefficient),
            "workPercentage": float(self.work_percentage),
            "finalPayableSalary": float(self.final_payable_salary),
            "lateMarks": self.late_marks,
            "lateMarkPenalty": float(self.late_mark_penalty),
        }
