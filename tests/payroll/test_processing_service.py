from __future__ import annotations

from decimal import Decimal

import openpyxl
import pytest

from src.salary_processor.salary_processor.core.exceptions import ResultNotFoundError, SpreadsheetReadError
from src.salary_processor.salary_processor.directory.model import EmployeeRecord
from src.salary_processor.salary_processor.directory.service import EmployeeDirectoryService
from src.salary_processor.salary_processor.payroll.processing_service import SalaryProcessingService
from src.salary_processor.salary_processor.payroll.service import SalaryComputationService
from src.salary_processor.salary_processor.spreadsheet.model import SheetRows, row_of

RAHUL_ROW = (
    "Employee: 12 : Rahul Sharma Total Work Duration: 180:30 Hrs Total OT: 5:15 Hrs "
    "Present: 22 Absent: 2 WeeklyOff: 4 Late By Hrs: 1:30 Late By Days: 2"
)


class InMemoryEmployees:
    def __init__(self, records):
        self._records = list(records)

    def list_all(self):
        return list(self._records)


def _service() -> SalaryProcessingService:
    directory = EmployeeDirectoryService(
        InMemoryEmployees(
            [
                EmployeeRecord(employee_id="12", name="Rahul Sharma", monthly_salary=Decimal("60000")),
                EmployeeRecord(employee_id="13", name="Anita Rao", monthly_salary=Decimal("45000")),
            ]
        )
    )
    return SalaryProcessingService(SalaryComputationService(directory))


def test_end_to_end_from_rows():
    service = _service()
    sheets = [SheetRows(name="June", rows=[row_of("Monthly Report"), row_of(RAHUL_ROW)])]

    results = service.process_sheets(sheets, total_working_days=26)

    assert len(results) == 1
    result = results[0]
    assert result.employee_id == "12"
    assert result.actual_worked_hours == Decimal("185.45")
    assert result.expected_hours == Decimal("208")
    assert result.final_payable_salary == pytest.approx(Decimal("53495.19"), abs=Decimal("0.01"))
    assert result.late_mark_penalty == Decimal("0")
    assert service.get_result("12") is result


def test_each_run_replaces_cached_results():
    service = _service()
    service.process_sheets([SheetRows(name="June", rows=[row_of(RAHUL_ROW)])])

    service.process_sheets([SheetRows(name="July", rows=[row_of("Employee: 13 : Anita Rao Total Work Duration: 240:00 Hrs")])])

    assert [r.employee_id for r in service.latest_results()] == ["13"]
    with pytest.raises(ResultNotFoundError):
        service.get_result("12")


def test_no_employees_clears_cache_and_returns_empty():
    service = _service()
    service.process_sheets([SheetRows(name="June", rows=[row_of(RAHUL_ROW)])])

    results = service.process_sheets([SheetRows(name="Empty", rows=[row_of("nothing here")])])

    assert results == []
    assert service.latest_results() == []


def test_lookup_before_any_run_fails():
    with pytest.raises(ResultNotFoundError):
        _service().get_result("12")


def test_process_workbook_reads_xlsx(tmp_path):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Employee:", "13 : Anita Rao", "Total Work Duration:", "120:00 Hrs"])
    ws.append(["Present:", 15, "Late By Days:", 3])
    path = tmp_path / "june.xlsx"
    wb.save(path)

    results = _service().process_workbook(path, total_working_days=30)

    assert len(results) == 1
    anita = results[0]
    assert anita.coefficient == Decimal("0.5")
    assert anita.late_marks == 3
    assert anita.late_mark_penalty == Decimal("750")
    assert anita.final_payable_salary == Decimal("21750")


def test_unreadable_workbook_propagates(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"garbage")

    with pytest.raises(SpreadsheetReadError):
        _service().process_workbook(path)
