from __future__ import annotations

from datetime import date

import pytest

from src.hrms_system.hrms_system.core.exceptions import NotFoundError, ValidationError


def test_violation_lifecycle(container, acme, ali):
    svc = container.violation_service
    v = svc.create_violation(
        {"employee_id": ali.employee_id, "violation_type": "absence", "violation_date": "2024-05-20"},
        "supervisor-1",
    )

    assert v.reported_by == "supervisor-1"
    assert v.violation_date == date(2024, 5, 20)

    updated = svc.update_violation(v.violation_id, {"action_taken": "warning"})
    assert updated.action_taken == "warning"
    assert [row.violation for row in svc.get_company_violations(acme.company_id)] == [updated]

    svc.delete_violation(v.violation_id)
    svc.delete_violation(v.violation_id)
    assert svc.get_employee_violations(ali.employee_id) == []


def test_violation_validation(container, ali):
    svc = container.violation_service
    with pytest.raises(ValidationError):
        svc.create_violation({"employee_id": ali.employee_id}, "supervisor-1")
    with pytest.raises(NotFoundError):
        svc.create_violation({"employee_id": "missing", "violation_type": "absence"}, "supervisor-1")
    with pytest.raises(NotFoundError):
        svc.update_violation("missing", {"notes": "x"})
