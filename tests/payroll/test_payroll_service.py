from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.hrms_system.hrms_system.core.exceptions import NotFoundError, ValidationError


def _deduct(container, employee_id: str, amount: str, when: str, reason: str = "late"):
    return container.payroll_service.create_deduction(
        {"employee_id": employee_id, "amount": amount, "reason": reason, "deduction_date": when},
        "mgr",
    )


def test_create_deduction(container, ali):
    d = _deduct(container, ali.employee_id, "25.50", "2024-06-03")

    assert d.amount == Decimal("25.50")
    assert d.processed_by == "mgr"
    assert d.deduction_date == date(2024, 6, 3)
    assert container.payroll_service.get_employee_deductions(ali.employee_id) == [d]


def test_deduction_date_defaults_to_today(container, ali, fixed_now):
    d = container.payroll_service.create_deduction({"employee_id": ali.employee_id, "amount": 5, "reason": "x"}, "mgr")

    assert d.deduction_date == fixed_now.date()


def test_create_deduction_validation(container, ali):
    svc = container.payroll_service
    with pytest.raises(ValidationError):
        svc.create_deduction({"employee_id": ali.employee_id, "amount": "0", "reason": "x"}, "mgr")
    with pytest.raises(ValidationError):
        svc.create_deduction({"employee_id": ali.employee_id, "amount": "-3", "reason": "x"}, "mgr")
    with pytest.raises(ValidationError):
        svc.create_deduction({"employee_id": ali.employee_id, "amount": "3"}, "mgr")
    with pytest.raises(ValidationError):
        svc.create_deduction({"employee_id": ali.employee_id, "amount": "3", "reason": "x"}, "")
    with pytest.raises(NotFoundError):
        svc.create_deduction({"employee_id": "missing", "amount": "3", "reason": "x"}, "mgr")


def test_update_and_delete_deduction(container, ali):
    svc = container.payroll_service
    d = _deduct(container, ali.employee_id, "10", "2024-06-03")

    updated = svc.update_deduction(d.deduction_id, {"amount": "12.75", "notes": "corrected"})
    assert updated.amount == Decimal("12.75")
    assert updated.notes == "corrected"

    with pytest.raises(ValidationError):
        svc.update_deduction(d.deduction_id, {"employee_id": "someone-else"})
    with pytest.raises(NotFoundError):
        svc.update_deduction("missing", {"amount": "1"})

    svc.delete_deduction(d.deduction_id)
    svc.delete_deduction(d.deduction_id)
    assert svc.get_employee_deductions(ali.employee_id) == []


def test_company_deductions_join_employee(container, acme, ali):
    other = container.company_service.create_company({"name": "Other"})
    bob = container.employee_service.create_employee(other.company_id, {"full_name": "Bob"})
    mine = _deduct(container, ali.employee_id, "10", "2024-06-03")
    _deduct(container, bob.employee_id, "10", "2024-06-03")

    rows = container.payroll_service.get_company_deductions(acme.company_id)

    assert [(r.deduction, r.employee.employee_id) for r in rows] == [(mine, ali.employee_id)]


def test_monthly_summary_nets_deductions_in_the_month(container, acme):
    svc = container.employee_service
    ali = svc.create_employee(acme.company_id, {"full_name": "Ali", "monthly_salary": "1000"})
    sara = svc.create_employee(acme.company_id, {"full_name": "Sara", "monthly_salary": "800"})
    gone = svc.create_employee(acme.company_id, {"full_name": "Omar", "monthly_salary": "900"})
    svc.archive_employee(gone.employee_id, "left")

    _deduct(container, ali.employee_id, "100", "2024-06-01")
    _deduct(container, ali.employee_id, "50.25", "2024-06-30")
    _deduct(container, ali.employee_id, "999", "2024-07-01")
    _deduct(container, sara.employee_id, "900", "2024-06-15")

    summary = container.payroll_service.build_monthly_summary(acme.company_id, 2024, 6)

    assert summary.period_start == date(2024, 6, 1)
    assert summary.period_end == date(2024, 6, 30)
    by_name = {r.full_name: r for r in summary.rows}
    assert set(by_name) == {"Ali", "Sara"}
    assert by_name["Ali"].total_deductions == Decimal("150.25")
    assert by_name["Ali"].net_salary == Decimal("849.75")
    assert by_name["Ali"].deduction_count == 2
    assert by_name["Sara"].net_salary == Decimal("0")
    assert summary.total_gross == Decimal("1800")
    assert summary.total_net == Decimal("849.75")


def test_monthly_summary_rejects_bad_month(container, acme):
    with pytest.raises(ValidationError):
        container.payroll_service.build_monthly_summary(acme.company_id, 2024, 13)
    with pytest.raises(ValidationError):
        container.payroll_service.build_monthly_summary(acme.company_id, "twenty", 1)
