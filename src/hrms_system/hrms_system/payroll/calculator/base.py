from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence

from ..model import EmployeeDeduction


class NetSalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_salary(self, gross: Decimal, deductions: Sequence[EmployeeDeduction]) -> Decimal:
        raise NotImplementedError
