from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping, Sequence

from .model import EmployeeRecord, placeholder_employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

UNKNOWN_EMPLOYEE_NAME = "Unknown Employee"


class EmployeeDirectoryService:
    """Read-through cache over an employee source.

    The cache is loaded lazily and reloaded by ``refresh()``. A failing source
    keeps whatever was cached before.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees
        self._lock = threading.Lock()
        self._cache: Mapping[str, EmployeeRecord] = MappingProxyType({})

    def refresh(self) -> int:
        logger.info("Fetching employee data from directory source")
        try:
            records = list(self._employees.list_all())
        except Exception:
            logger.exception("Error fetching employee data, keeping cached directory")
            return len(self._cache)

        by_id = {r.employee_id: r for r in records}
        with self._lock:
            self._cache = MappingProxyType(by_id)
        logger.info("Successfully loaded %d employees", len(by_id))
        return len(by_id)

    def _current(self) -> Mapping[str, EmployeeRecord]:
        if not self._cache:
            self.refresh()
        return self._cache

    def list_employees(self) -> Sequence[EmployeeRecord]:
        employees = list(self._current().values())
        logger.info("Returning %d employees from directory cache", len(employees))
        return employees

    def employee_map(self) -> dict[str, EmployeeRecord]:
        return dict(self._current())

    def get_employee(self, employee_id: str) -> EmployeeRecord:
        employee = self._current().get(employee_id)
        if employee is None:
            logger.warning("Employee with ID %s not found, creating default employee", employee_id)
            return placeholder_employee(employee_id, UNKNOWN_EMPLOYEE_NAME)
        return employee
