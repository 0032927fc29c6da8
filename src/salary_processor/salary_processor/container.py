from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.extractor import AttendanceExtractor
from .core.constants import DEFAULT_TOTAL_WORKING_DAYS
from .core.enums import DirectoryMode
from .database.connection import DBConfig, DatabaseConnection
from .directory.mysql_employee_repository import MySQLEmployeeRepository
from .directory.repository import EmployeeRepository
from .directory.service import EmployeeDirectoryService
from .payroll.processing_service import SalaryProcessingService
from .payroll.result_cache import SalaryResultCache
from .payroll.service import SalaryComputationService
from .payroll.settings import WorkingDaysSetting


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: EmployeeRepository

    employee_directory: EmployeeDirectoryService
    extractor: AttendanceExtractor
    salary_service: SalaryComputationService
    processing_service: SalaryProcessingService


def build_container(
    *,
    db_config: dict,
    total_working_days: int = DEFAULT_TOTAL_WORKING_DAYS,
    directory_mode: str = DirectoryMode.STRICT.value,
    employees_repo: Optional[EmployeeRepository] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = employees_repo or MySQLEmployeeRepository(conn)
    employee_directory = EmployeeDirectoryService(employees_repo)

    extractor = AttendanceExtractor()
    salary_service = SalaryComputationService(
        employee_directory,
        working_days=WorkingDaysSetting(total_working_days),
        mode=DirectoryMode(directory_mode.lower()),
    )
    processing_service = SalaryProcessingService(
        salary_service,
        extractor=extractor,
        cache=SalaryResultCache(),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_directory=employee_directory,
        extractor=extractor,
        salary_service=salary_service,
        processing_service=processing_service,
    )
