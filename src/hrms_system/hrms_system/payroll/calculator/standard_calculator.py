from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..model import EmployeeDeduction
from .base import NetSalaryCalculator


class StandardNetSalaryCalculator(NetSalaryCalculator):
    """Standard rule: gross - sum(deductions), not below 0."""

    def net_salary(self, gross: Decimal, deductions: Sequence[EmployeeDeduction]) -> Decimal:
        total = sum((d.amount for d in deductions), Decimal("0"))
        return max(gross - total, Decimal("0"))
