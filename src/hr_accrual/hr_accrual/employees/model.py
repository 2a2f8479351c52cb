from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Working hours are ``HH:MM`` clock strings; both are None when no schedule
    is configured for the employee.
    """

    employee_id: str
    employee_code: str
    first_name: str
    last_name: str
    department_name: Optional[str] = None
    status: str = "active"
    role: Role = Role.EMPLOYEE
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def has_schedule(self) -> bool:
        return bool(self.working_hours_start and self.working_hours_end)
