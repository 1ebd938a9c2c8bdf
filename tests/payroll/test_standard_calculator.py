from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.hrms_system.hrms_system.payroll.calculator.standard_calculator import StandardNetSalaryCalculator
from src.hrms_system.hrms_system.payroll.model import EmployeeDeduction


def _d(amount: str) -> EmployeeDeduction:
    return EmployeeDeduction(
        deduction_id="d",
        employee_id="e",
        amount=Decimal(amount),
        reason="r",
        deduction_date=date(2026, 2, 1),
        processed_by="mgr",
        created_at=datetime(2026, 2, 1, 8, 0, 0),
        updated_at=datetime(2026, 2, 1, 8, 0, 0),
    )


def test_net_salary_subtracts_deductions():
    calc = StandardNetSalaryCalculator()
    assert calc.net_salary(Decimal("1000"), [_d("100"), _d("0.50")]) == Decimal("899.50")


def test_net_salary_without_deductions_is_gross():
    calc = StandardNetSalaryCalculator()
    assert calc.net_salary(Decimal("750"), []) == Decimal("750")


def test_net_salary_not_below_zero():
    calc = StandardNetSalaryCalculator()
    assert calc.net_salary(Decimal("100"), [_d("250")]) == Decimal("0")
