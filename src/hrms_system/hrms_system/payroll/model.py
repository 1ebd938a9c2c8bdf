from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class EmployeeDeduction:
    deduction_id: str
    employee_id: str
    amount: Decimal
    reason: str
    deduction_date: date
    processed_by: str
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None


@dataclass(frozen=True)
class DeductionWithEmployee:
    deduction: EmployeeDeduction
    employee: Employee


@dataclass(frozen=True)
class PayrollRow:
    employee_id: str
    full_name: str
    gross_salary: Decimal
    total_deductions: Decimal
    net_salary: Decimal
    deduction_count: int


@dataclass(frozen=True)
class PayrollSummary:
    company_id: str
    period_start: date
    period_end: date
    rows: list[PayrollRow]
    total_gross: Decimal
    total_deductions: Decimal
    total_net: Decimal
