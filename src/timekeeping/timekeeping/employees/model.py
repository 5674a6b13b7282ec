from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: staff member whose punches are accounted."""

    employee_id: int
    name: str
    role: Role = Role.EMPLOYEE
    is_active: bool = True
