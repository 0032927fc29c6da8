"""Text patterns for attendance export rows.

Identity extraction is an ordered cascade of matchers; each returns an
``(employee_id, employee_name)`` pair or ``None`` and the first hit wins.
"""
from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Callable, Optional

from ..core.constants import EMPLOYEE_MARKER

logger = logging.getLogger(__name__)

Identity = tuple[str, str]
IdentityMatcher = Callable[[str], Optional[Identity]]

PRIMARY_PATTERN = re.compile(r"Employee:\s*(\d+)\s*:\s*(\S.+?)(?=\s+Total\s+Work|$)")
FALLBACK_PATTERN = re.compile(r"(\d+)\s*:\s*(\S.+?)(?=\s+Total\s+Work|$)")
SIMPLE_PATTERN = re.compile(r"Employee:\s*([^:]+):([^T]+)")

WORK_DURATION_PATTERN = re.compile(r"Total Work Duration:\s*([\d:]+)\s*Hrs")
OT_PATTERN = re.compile(r"Total OT:\s*([\d:]+)\s*Hrs")
PRESENT_PATTERN = re.compile(r"Present:\s*([\d.]+)")
ABSENT_PATTERN = re.compile(r"Absent:\s*([\d.]+)")
WEEKLY_OFF_PATTERN = re.compile(r"WeeklyOff:\s*([\d.]+)")
LATE_HRS_PATTERN = re.compile(r"Late By Hrs:\s*([\d:]+)")
LATE_DAYS_PATTERN = re.compile(r"Late By Days:\s*([\d.]+)")

_TRAILING_NOISE = re.compile(r"[\s.]+$")
_NAME_TERMINATOR = "Total Work"


def _regex_matcher(pattern: re.Pattern[str]) -> IdentityMatcher:
    def match(text: str) -> Optional[Identity]:
        found = pattern.search(text)
        if not found:
            return None
        return found.group(1).strip(), found.group(2).strip()

    return match


def match_manual(text: str) -> Optional[Identity]:
    """Last resort: split whatever follows the marker on its first colon."""
    index = text.find(EMPLOYEE_MARKER)
    if index < 0:
        return None

    after_marker = text[index + len(EMPLOYEE_MARKER):].strip()
    parts = after_marker.split(":", 1)
    if len(parts) != 2:
        return None

    employee_id = parts[0].strip()
    raw_name = parts[1].strip()
    end = raw_name.find(_NAME_TERMINATOR)
    employee_name = raw_name[:end].strip() if end > 0 else raw_name
    return employee_id, employee_name


match_primary = _regex_matcher(PRIMARY_PATTERN)
match_fallback = _regex_matcher(FALLBACK_PATTERN)
match_simple = _regex_matcher(SIMPLE_PATTERN)

IDENTITY_MATCHERS: tuple[tuple[str, IdentityMatcher], ...] = (
    ("primary", match_primary),
    ("fallback", match_fallback),
    ("simple", match_simple),
    ("manual", match_manual),
)


def match_identity(text: str) -> Optional[Identity]:
    for label, matcher in IDENTITY_MATCHERS:
        identity = matcher(text)
        if identity and identity[0] and identity[1]:
            logger.info("%s pattern match: ID=%s, Name='%s'", label.capitalize(), identity[0], identity[1])
            return identity
    return None


def clean_name(name: str) -> str:
    return _TRAILING_NOISE.sub("", name)


def is_noise_name(name: str) -> bool:
    """Placeholder rows ("Employee", test accounts) are not real employees."""
    lowered = name.lower()
    return "test" in lowered or lowered == "employee"


def parse_duration(value: str) -> Decimal:
    """Convert ``H:MM`` into ``H + MM/100`` (128:37 -> 128.37, minutes are not /60)."""
    parts = value.strip().split(":")
    if len(parts) != 2:
        logger.warning("Failed to parse duration: %s", value)
        return Decimal("0")
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        logger.warning("Failed to parse duration: %s", value)
        return Decimal("0")
    return Decimal(hours) + Decimal(minutes) / Decimal(100)


def parse_count(value: str) -> int:
    """Parse a day count, tolerating decimal-formatted integers ("22.0")."""
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(float(text))
    except ValueError:
        logger.warning("Failed to parse number: %s", value)
        return 0


def search_duration(text: str, pattern: re.Pattern[str]) -> Decimal:
    found = pattern.search(text)
    if not found:
        logger.debug("No match for %s", pattern.pattern)
        return Decimal("0")
    return parse_duration(found.group(1))


def search_count(text: str, pattern: re.Pattern[str]) -> int:
    found = pattern.search(text)
    if not found:
        logger.debug("No match for %s", pattern.pattern)
        return 0
    return parse_count(found.group(1))
