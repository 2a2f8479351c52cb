from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_status(self, statuses: Iterable[str]) -> Sequence[Employee]:
        """Employees in the given statuses, ordered by first name."""

        raise NotImplementedError
