"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

EMPLOYEE_MARKER = "Employee:"

DEFAULT_TOTAL_WORKING_DAYS = 30
MIN_TOTAL_WORKING_DAYS = 1
MAX_TOTAL_WORKING_DAYS = 31

# Salary used whenever an employee has no directory record.
DEFAULT_MONTHLY_SALARY = Decimal("50000")

HOURS_PER_DAY = Decimal("8")

# Late-mark penalties are always priced against a 30-day month.
PENALTY_MONTH_DAYS = Decimal("30")
FORGIVEN_LATE_MARKS = 2
PENALTY_THRESHOLD_LATE_MARKS = 3

FALLBACK_HOURS_WORKED = Decimal("8")
FORMULA_ERROR_TEXT = "#FORMULA_ERROR#"
