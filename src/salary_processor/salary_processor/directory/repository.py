from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeRecord


class EmployeeRepository(Protocol):
    """Source of employee master data.

    Note (DIP): the directory service depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[EmployeeRecord]:
        raise NotImplementedError
