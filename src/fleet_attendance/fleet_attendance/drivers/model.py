from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EmploymentStatus


@dataclass(frozen=True)
class Driver:
    """Driver master data, read-only from the attendance side."""

    driver_id: str
    full_name: str
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.employment_status == EmploymentStatus.ACTIVE
