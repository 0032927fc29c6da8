from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .model import SalaryResult


class SalaryResultCache:
    """Latest salary results keyed by employee id.

    Each run publishes a brand-new immutable snapshot; readers always see one
    whole generation.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, SalaryResult] = MappingProxyType({})

    def replace(self, results: Iterable[SalaryResult]) -> Mapping[str, SalaryResult]:
        snapshot = MappingProxyType({r.employee_id: r for r in results})
        with self._lock:
            self._snapshot = snapshot
        return snapshot

    def snapshot(self) -> Mapping[str, SalaryResult]:
        with self._lock:
            return self._snapshot

    def get(self, employee_id: str) -> Optional[SalaryResult]:
        return self.snapshot().get(employee_id)

    def __len__(self) -> int:
        return len(self.snapshot())
