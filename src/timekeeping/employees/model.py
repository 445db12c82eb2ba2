from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee, read-only from the external directory."""

    employee_id: str
    full_name: str
    is_active: bool = True
