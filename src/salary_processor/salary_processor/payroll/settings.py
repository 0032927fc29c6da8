from __future__ import annotations

import logging
import threading

from ..core.constants import DEFAULT_TOTAL_WORKING_DAYS, MAX_TOTAL_WORKING_DAYS, MIN_TOTAL_WORKING_DAYS

logger = logging.getLogger(__name__)


def coerce_working_days(days: int) -> int:
    """Out-of-range values fall back to the default instead of failing."""
    if days < MIN_TOTAL_WORKING_DAYS or days > MAX_TOTAL_WORKING_DAYS:
        logger.warning(
            "Invalid total working days value: %s. Using default value of %d.",
            days,
            DEFAULT_TOTAL_WORKING_DAYS,
        )
        return DEFAULT_TOTAL_WORKING_DAYS
    return days


class WorkingDaysSetting:
    """Process-wide "total working days in the billing period" value.

    Every salary computation reads the value most recently set.
    """

    def __init__(self, initial: int = DEFAULT_TOTAL_WORKING_DAYS):
        self._lock = threading.Lock()
        self._days = coerce_working_days(initial)

    def get(self) -> int:
        with self._lock:
            return self._days

    def set(self, days: int) -> int:
        value = coerce_working_days(days)
        with self._lock:
            self._days = value
        logger.info("Total working days set to: %d", value)
        return value
