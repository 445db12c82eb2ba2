from __future__ import annotations

from .repository import EmployeeRepository


class EmployeeDirectory:
    """Use case: resolve employee names for reports."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def name_lookup(self) -> dict[str, str]:
        return {e.employee_id: e.full_name for e in self._employees.list_all()}

    def exists(self, employee_id: str) -> bool:
        return self._employees.get_by_id(employee_id) is not None
