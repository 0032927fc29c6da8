from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..attendance.model import AttendanceSummary
from ..core.enums import DirectoryMode
from ..directory.model import EmployeeRecord, placeholder_employee
from ..directory.service import EmployeeDirectoryService
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryResult
from .settings import WorkingDaysSetting, coerce_working_days

logger = logging.getLogger(__name__)


def _placeholder_for(summary: AttendanceSummary) -> EmployeeRecord:
    name = summary.employee_name or f"Employee {summary.employee_id}"
    logger.info("Created default employee for ID: %s (%s)", summary.employee_id, name)
    return placeholder_employee(summary.employee_id, name)


class SalaryComputationService:
    """Computes payable salaries from attendance summaries.

    STRICT mode only pays ids known to the employee directory. PERMISSIVE mode
    also pays unknown ids, using a placeholder employee at the default salary.
    """

    def __init__(
        self,
        directory: Optional[EmployeeDirectoryService] = None,
        *,
        calculator: Optional[SalaryCalculator] = None,
        working_days: Optional[WorkingDaysSetting] = None,
        mode: DirectoryMode = DirectoryMode.STRICT,
    ):
        self._directory = directory
        self._calculator = calculator or StandardSalaryCalculator()
        self._working_days = working_days or WorkingDaysSetting()
        self._mode = DirectoryMode(mode)

    @property
    def mode(self) -> DirectoryMode:
        return self._mode

    @property
    def working_days(self) -> WorkingDaysSetting:
        return self._working_days

    def compute_salaries(
        self,
        summaries: Mapping[str, AttendanceSummary],
        *,
        total_working_days: Optional[int] = None,
    ) -> list[SalaryResult]:
        """Compute against the directory collaborator's current employees."""
        directory = self._directory.employee_map() if self._directory else {}
        logger.info("Retrieved %d employees from directory", len(directory))
        return self.compute(summaries, directory, total_working_days)

    def compute(
        self,
        summaries: Mapping[str, AttendanceSummary],
        directory: Mapping[str, EmployeeRecord],
        total_working_days: Optional[int] = None,
    ) -> list[SalaryResult]:
        if total_working_days is None:
            days = self._working_days.get()
        else:
            days = coerce_working_days(int(total_working_days))

        logger.info(
            "Computing salaries for %d employees (mode=%s, total working days=%d)",
            len(summaries),
            self._mode.value,
            days,
        )

        matching = [employee_id for employee_id in summaries if employee_id in directory]
        logger.info("Found %d matching employee IDs: %s", len(matching), matching)

        employees: dict[str, EmployeeRecord] = {}
        if self._mode == DirectoryMode.STRICT:
            unmatched = [employee_id for employee_id in summaries if employee_id not in directory]
            if unmatched:
                logger.info("Skipping employee IDs missing from directory: %s", unmatched)
            if not matching:
                logger.warning("No attendance IDs matched the employee directory, nothing to compute")
                return []
            for employee_id in matching:
                employees[employee_id] = directory[employee_id]
        else:
            for employee_id, summary in summaries.items():
                employee = directory.get(employee_id)
                employees[employee_id] = employee if employee is not None else _placeholder_for(summary)

        results = [
            self._calculator.calculate(summaries[employee_id], employee, total_working_days=days)
            for employee_id, employee in employees.items()
        ]
        logger.info("Computed %d salary results", len(results))
        return results
