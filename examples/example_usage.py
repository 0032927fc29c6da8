"""Example: run the salary pipeline through the service layer (no Flask).

Usage: python -m examples.example_usage path/to/attendance.xls[x] [total_days]
"""

import importlib
import sys

from config import get_settings_module

from src.salary_processor.salary_processor.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        total_working_days=settings.TOTAL_WORKING_DAYS,
        directory_mode=settings.DIRECTORY_MODE,
    )
    total_days = int(sys.argv[2]) if len(sys.argv) > 2 else None
    for result in container.processing_service.process_workbook(sys.argv[1], total_working_days=total_days):
        print(result.to_dict())


if __name__ == "__main__":
    main()
