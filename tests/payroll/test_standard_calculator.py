from datetime import date
from decimal import Decimal

import pytest

from src.salary_processor.salary_processor.attendance.model import AttendanceSummary
from src.salary_processor.salary_processor.directory.model import EmployeeRecord
from src.salary_processor.salary_processor.payroll.calculator.standard_calculator import StandardSalaryCalculator


def _summary(hours="0", overtime="0", late_days=0, employee_id="12"):
    return AttendanceSummary(
        employee_id=employee_id,
        employee_name="Rahul Sharma",
        record_date=date(2025, 6, 30),
        hours_worked=Decimal(hours),
        overtime_hours=Decimal(overtime),
        late_days=late_days,
    )


@pytest.mark.parametrize("late_marks", [0, 1, 2])
def test_first_two_late_marks_are_forgiven(late_marks):
    calc = StandardSalaryCalculator()
    assert calc.late_mark_penalty(Decimal("60000"), late_marks) == Decimal("0")


def test_third_late_mark_costs_half_a_day():
    calc = StandardSalaryCalculator()
    salary = Decimal("60000")
    assert calc.late_mark_penalty(salary, 3) == salary / 60


def test_each_further_late_mark_costs_a_third_of_half_a_day():
    calc = StandardSalaryCalculator()
    salary = Decimal("90000")
    assert calc.late_mark_penalty(salary, 5) == salary / 60 + 2 * (salary / 180)


def test_coefficient_is_not_capped():
    calc = StandardSalaryCalculator()
    employee = EmployeeRecord(employee_id="12", name="Rahul Sharma", monthly_salary=Decimal("40000"))

    result = calc.calculate(_summary(hours="280", overtime="20"), employee, total_working_days=20)

    assert result.expected_hours == Decimal("160")
    assert result.actual_worked_hours == Decimal("300")
    assert result.coefficient == Decimal("1.875")
    assert result.final_payable_salary == Decimal("75000")


def test_end_to_end_figures_without_penalty():
    calc = StandardSalaryCalculator()
    employee = EmployeeRecord(employee_id="12", name="Rahul Sharma", monthly_salary=Decimal("60000"))

    result = calc.calculate(_summary(hours="180.30", overtime="5.15", late_days=2), employee, total_working_days=26)

    assert result.actual_worked_hours == Decimal("185.45")
    assert result.expected_hours == Decimal("208")
    assert result.coefficient == pytest.approx(Decimal("0.8916"), abs=Decimal("0.0001"))
    assert result.final_payable_salary == pytest.approx(Decimal("53495.19"), abs=Decimal("0.01"))
    assert result.late_marks == 2
    assert result.late_mark_penalty == Decimal("0")


def test_penalty_is_subtracted_from_prorated_salary():
    calc = StandardSalaryCalculator()
    employee = EmployeeRecord(employee_id="12", name="Rahul Sharma", monthly_salary=Decimal("60000"))

    result = calc.calculate(_summary(hours="240", late_days=4), employee, total_working_days=30)

    # 60000 full month, minus half day (1000) and a third of it (333.33...)
    assert result.coefficient == Decimal("1")
    assert result.late_marks == 4
    assert result.late_mark_penalty == pytest.approx(Decimal("1333.33"), abs=Decimal("0.01"))
    assert result.final_payable_salary == pytest.approx(Decimal("58666.67"), abs=Decimal("0.01"))


def test_result_reports_percentage_and_serializes_every_field():
    calc = StandardSalaryCalculator()
    employee = EmployeeRecord(employee_id="12", name="Rahul Sharma", monthly_salary=Decimal("60000"))

    result = calc.calculate(_summary(hours="185.45"), employee, total_working_days=26)

    assert result.work_percentage == Decimal("89.16")
    payload = result.to_dict()
    assert set(payload) == {
        "employeeId",
        "employeeName",
        "monthlySalary",
        "expectedHours",
        "actualWorkedHours",
        "coefficient",
        "workPercentage",
        "finalPayableSalary",
        "lateMarks",
        "lateMarkPenalty",
    }
    assert payload["lateMarkPenalty"] == 0.0


def test_actual_hours_are_the_summary_total_hours():
    calc = StandardSalaryCalculator()
    employee = EmployeeRecord(employee_id="12", name="Rahul Sharma", monthly_salary=Decimal("60000"))
    summary = _summary(hours="128.37", overtime="3.20")

    result = calc.calculate(summary, employee, total_working_days=26)

    assert summary.total_hours == Decimal("131.57")
    assert result.actual_worked_hours == summary.total_hours
