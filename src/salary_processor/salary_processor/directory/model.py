from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.constants import DEFAULT_MONTHLY_SALARY


@dataclass(frozen=True)
class EmployeeRecord:
    """Employee master data used for payroll (id, display name, monthly salary)."""

    employee_id: str
    name: str
    monthly_salary: Decimal = DEFAULT_MONTHLY_SALARY

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "monthlySalary": float(self.monthly_salary),
        }


def placeholder_employee(employee_id: str, name: str) -> EmployeeRecord:
    return EmployeeRecord(employee_id=employee_id, name=name, monthly_salary=DEFAULT_MONTHLY_SALARY)
