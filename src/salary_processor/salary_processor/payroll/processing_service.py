from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..attendance.extractor import AttendanceExtractor
from ..core.exceptions import ResultNotFoundError
from ..spreadsheet.model import SheetRows
from ..spreadsheet.reader import WorkbookSource, read_workbook
from .model import SalaryResult
from .result_cache import SalaryResultCache
from .service import SalaryComputationService

logger = logging.getLogger(__name__)


class SalaryProcessingService:
    """Runs the whole pipeline: workbook -> attendance summaries -> salaries.

    Results of the latest run are kept for single-employee lookups; every run
    replaces them entirely.
    """

    def __init__(
        self,
        computation: SalaryComputationService,
        *,
        extractor: Optional[AttendanceExtractor] = None,
        cache: Optional[SalaryResultCache] = None,
        reader: Callable[[WorkbookSource], Sequence[SheetRows]] = read_workbook,
    ):
        self._computation = computation
        self._extractor = extractor or AttendanceExtractor()
        self._cache = cache or SalaryResultCache()
        self._reader = reader

    def process_workbook(self, source: WorkbookSource, *, total_working_days: Optional[int] = None) -> list[SalaryResult]:
        sheets = self._reader(source)
        return self.process_sheets(sheets, total_working_days=total_working_days)

    def process_sheets(self, sheets: Sequence[SheetRows], *, total_working_days: Optional[int] = None) -> list[SalaryResult]:
        summaries = self._extractor.extract_sheets(sheets)
        logger.info("Employee IDs found in workbook: %s", list(summaries))

        if summaries:
            results = self._computation.compute_salaries(summaries, total_working_days=total_working_days)
        else:
            logger.warning("No valid attendance records found in the workbook")
            results = []

        self._cache.replace(results)
        if not results:
            logger.warning("No salary results generated, check employee ID mapping or attendance format")
        return results

    def get_result(self, employee_id: str) -> SalaryResult:
        result = self._cache.get(employee_id)
        if result is None:
            raise ResultNotFoundError(f"No salary result for employee {employee_id}, process a workbook first")
        return result

    def latest_results(self) -> list[SalaryResult]:
        return list(self._cache.snapshot().values())
