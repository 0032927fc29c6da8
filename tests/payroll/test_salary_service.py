from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.salary_processor.salary_processor.attendance.model import AttendanceSummary
from src.salary_processor.salary_processor.core.enums import DirectoryMode
from src.salary_processor.salary_processor.directory.model import EmployeeRecord
from src.salary_processor.salary_processor.directory.service import EmployeeDirectoryService
from src.salary_processor.salary_processor.payroll.service import SalaryComputationService
from src.salary_processor.salary_processor.payroll.settings import WorkingDaysSetting


class InMemoryEmployees:
    def __init__(self, records):
        self._records = list(records)

    def list_all(self):
        return list(self._records)


def _summary(employee_id: str, name: str = "", hours: str = "240") -> AttendanceSummary:
    return AttendanceSummary(
        employee_id=employee_id,
        employee_name=name,
        record_date=date(2025, 6, 30),
        hours_worked=Decimal(hours),
    )


def _employee(employee_id: str, salary: str = "30000") -> EmployeeRecord:
    return EmployeeRecord(employee_id=employee_id, name=f"Name {employee_id}", monthly_salary=Decimal(salary))


def test_strict_mode_keeps_only_ids_in_both_sources():
    summaries = {"A": _summary("A"), "B": _summary("B"), "C": _summary("C")}
    directory = {"A": _employee("A"), "C": _employee("C")}

    results = SalaryComputationService().compute(summaries, directory, 30)

    assert [r.employee_id for r in results] == ["A", "C"]


def test_strict_mode_without_matches_returns_empty(caplog):
    summaries = {"A": _summary("A")}

    with caplog.at_level("WARNING"):
        results = SalaryComputationService().compute(summaries, {"Z": _employee("Z")}, 30)

    assert results == []
    assert "No attendance IDs matched" in caplog.text


def test_permissive_mode_synthesizes_placeholder_employees():
    summaries = {"A": _summary("A"), "B": _summary("B", name="Anita Rao"), "C": _summary("C")}
    directory = {"A": _employee("A", salary="60000")}
    service = SalaryComputationService(mode=DirectoryMode.PERMISSIVE)

    results = {r.employee_id: r for r in service.compute(summaries, directory, 30)}

    assert set(results) == {"A", "B", "C"}
    assert results["A"].monthly_salary == Decimal("60000")
    assert results["B"].employee_name == "Anita Rao"
    assert results["B"].monthly_salary == Decimal("50000")
    assert results["C"].employee_name == "Employee C"
    assert results["C"].final_payable_salary == Decimal("50000")


def test_permissive_mode_with_empty_directory_still_pays_everyone():
    service = SalaryComputationService(mode="permissive")

    results = service.compute({"A": _summary("A")}, {}, 30)

    assert len(results) == 1


def test_reads_working_days_setting_when_not_given():
    setting = WorkingDaysSetting(30)
    service = SalaryComputationService(working_days=setting)
    summaries = {"A": _summary("A", hours="160")}
    directory = {"A": _employee("A")}

    assert service.compute(summaries, directory)[0].expected_hours == Decimal("240")

    setting.set(20)
    assert service.compute(summaries, directory)[0].expected_hours == Decimal("160")


def test_explicit_out_of_range_days_fall_back_to_default():
    results = SalaryComputationService().compute({"A": _summary("A")}, {"A": _employee("A")}, 0)

    assert results[0].expected_hours == Decimal("240")


def test_compute_salaries_uses_directory_collaborator():
    directory = EmployeeDirectoryService(InMemoryEmployees([_employee("A", salary="48000")]))
    service = SalaryComputationService(directory)

    results = service.compute_salaries({"A": _summary("A", hours="120"), "B": _summary("B")}, total_working_days=30)

    assert len(results) == 1
    assert results[0].employee_name == "Name A"
    assert results[0].final_payable_salary == Decimal("24000")
