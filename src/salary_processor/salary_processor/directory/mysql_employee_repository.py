from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import EmployeeRecord
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[EmployeeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, monthly_salary
                FROM employees
                ORDER BY employee_id
                """
            )
            rows = fetchall(cur)
            return [
                EmployeeRecord(
                    employee_id=str(r["employee_id"]).strip(),
                    name=r.get("name") or "",
                    monthly_salary=to_decimal(r.get("monthly_salary"), default=Decimal("0")),
                )
                for r in rows
            ]
