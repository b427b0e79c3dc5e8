from __future__ import annotations

from typing import Sequence

from ..core.enums import EmploymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Driver
from .repository import DriverRepository


def _status(value) -> EmploymentStatus:
    try:
        return EmploymentStatus(str(value or "").lower())
    except ValueError:
        return EmploymentStatus.INACTIVE


class MySQLDriverRepository(DriverRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_roster(self, *, active_only: bool = False) -> Sequence[Driver]:
        sql = "SELECT driver_id, full_name, employment_status FROM drivers"
        params: tuple = ()
        if active_only:
            sql += " WHERE employment_status=%s"
            params = (EmploymentStatus.ACTIVE.value,)
        sql += " ORDER BY full_name ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [
                Driver(
                    driver_id=str(r["driver_id"]),
                    full_name=r["full_name"],
                    employment_status=_status(r.get("employment_status")),
                )
                for r in fetchall(cur)
            ]
