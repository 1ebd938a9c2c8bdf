from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import month_bounds, now_local
from ..common.ids import new_id
from ..common.validators import (
    as_date,
    as_decimal,
    as_int,
    as_optional_text,
    as_text,
    coerce_fields,
    require_fields,
    require_non_empty,
    require_positive,
)
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import NetSalaryCalculator
from .calculator.standard_calculator import StandardNetSalaryCalculator
from .model import DeductionWithEmployee, EmployeeDeduction, PayrollRow, PayrollSummary
from .repository import DeductionRepository

DEDUCTION_FIELDS = {
    "employee_id": as_text,
    "amount": as_decimal,
    "reason": as_text,
    "deduction_date": as_date,
    "notes": as_optional_text,
}

# employee_id is fixed once recorded
UPDATABLE_DEDUCTION_FIELDS = {k: v for k, v in DEDUCTION_FIELDS.items() if k != "employee_id"}


class PayrollService:
    def __init__(
        self,
        deductions: DeductionRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[NetSalaryCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._deductions = deductions
        self._employees = employees
        self._calculator = calculator or StandardNetSalaryCalculator()
        self._clock = clock

    def get_employee_deductions(self, employee_id: str) -> Sequence[EmployeeDeduction]:
        return self._deductions.list_by_employee(employee_id)

    def get_company_deductions(self, company_id: str) -> list[DeductionWithEmployee]:
        employees = {
            e.employee_id: e for e in self._employees.list_by_company(company_id, include_archived=True)
        }
        if not employees:
            return []
        return [
            DeductionWithEmployee(deduction=d, employee=employees[d.employee_id])
            for d in self._deductions.list_by_employees(list(employees))
        ]

    def create_deduction(self, data: Mapping[str, Any], processed_by: str) -> EmployeeDeduction:
        processed_by = require_non_empty(processed_by, "processed_by")
        values = coerce_fields(data, DEDUCTION_FIELDS, entity="deduction")
        require_fields(values, ["employee_id", "amount", "reason"])
        require_positive(values["amount"], "amount")

        if not self._employees.get(values["employee_id"]):
            raise NotFoundError(f"Employee {values['employee_id']} not found")

        now = self._clock()
        values.setdefault("deduction_date", now.date())
        deduction = EmployeeDeduction(
            deduction_id=new_id(),
            processed_by=processed_by,
            created_at=now,
            updated_at=now,
            **values,
        )
        return self._deductions.add(deduction)

    def update_deduction(self, deduction_id: str, changes: Mapping[str, Any]) -> EmployeeDeduction:
        values = coerce_fields(changes, UPDATABLE_DEDUCTION_FIELDS, entity="deduction")
        if "amount" in values:
            require_positive(values["amount"], "amount")

        updated = self._deductions.update(deduction_id, **values, updated_at=self._clock())
        if not updated:
            raise NotFoundError(f"Deduction {deduction_id} not found")
        return updated

    def delete_deduction(self, deduction_id: str) -> None:
        self._deductions.delete(deduction_id)

    def build_monthly_summary(self, company_id: str, year: Any, month: Any) -> PayrollSummary:
        """Gross salary minus the deductions dated in the month, per non-archived employee."""

        year = as_int(year, "year")
        month = as_int(month, "month")
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")
        if not 1 <= year <= 9999:
            raise ValidationError("year is out of range")
        start, end = month_bounds(year, month)

        employees = self._employees.list_by_company(company_id)
        by_employee: dict[str, list[EmployeeDeduction]] = defaultdict(list)
        if employees:
            for d in self._deductions.list_by_employees([e.employee_id for e in employees]):
                if start <= d.deduction_date <= end:
                    by_employee[d.employee_id].append(d)

        rows: list[PayrollRow] = []
        for e in employees:
            gross = e.monthly_salary or Decimal("0")
            taken = by_employee.get(e.employee_id, [])
            rows.append(
                PayrollRow(
                    employee_id=e.employee_id,
                    full_name=e.full_name,
                    gross_salary=gross,
                    total_deductions=sum((d.amount for d in taken), Decimal("0")),
                    net_salary=self._calculator.net_salary(gross, taken),
                    deduction_count=len(taken),
                )
            )

        return PayrollSummary(
            company_id=company_id,
            period_start=start,
            period_end=end,
            rows=rows,
            total_gross=sum((r.gross_salary for r in rows), Decimal("0")),
            total_deductions=sum((r.total_deductions for r in rows), Decimal("0")),
            total_net=sum((r.net_salary for r in rows), Decimal("0")),
        )
