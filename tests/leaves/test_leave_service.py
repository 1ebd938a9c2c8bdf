from __future__ import annotations

import threading

import pytest

from src.hrms_system.hrms_system.core.enums import LeaveStatus, LeaveType
from src.hrms_system.hrms_system.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError


def _new_leave(container, employee_id: str, **extra):
    data = {"employee_id": employee_id, "start_date": "2024-06-10", "end_date": "2024-06-12"}
    data.update(extra)
    return container.leave_service.create_leave(data)


def test_create_leave_starts_pending_with_inclusive_days(container, ali):
    leave = _new_leave(container, ali.employee_id, reason="family")

    assert leave.status == LeaveStatus.PENDING
    assert leave.leave_type == LeaveType.ANNUAL
    assert leave.days == 3
    assert leave.reason == "family"
    assert leave.approver_id is None


def test_create_leave_validation(container, ali):
    svc = container.leave_service
    with pytest.raises(NotFoundError):
        svc.create_leave({"employee_id": "missing", "start_date": "2024-06-10", "end_date": "2024-06-10"})
    with pytest.raises(ValidationError):
        svc.create_leave({"employee_id": ali.employee_id, "start_date": "2024-06-10"})
    with pytest.raises(ValidationError):
        svc.create_leave({"employee_id": ali.employee_id, "start_date": "2024-06-10", "end_date": "2024-06-09"})
    with pytest.raises(ValidationError):
        _new_leave(container, ali.employee_id, days=0)
    with pytest.raises(ValidationError):
        _new_leave(container, ali.employee_id, status="approved")
    with pytest.raises(ValidationError):
        _new_leave(container, ali.employee_id, leave_type="vacation")


def test_approve_records_approver(container, ali):
    leave = _new_leave(container, ali.employee_id)

    approved = container.leave_service.approve_leave(leave.leave_id, "manager-1")

    assert approved.status == LeaveStatus.APPROVED
    assert approved.approver_id == "manager-1"
    assert approved.decided_at is not None
    assert approved.rejection_reason is None


def test_reject_records_reason(container, ali):
    leave = _new_leave(container, ali.employee_id)

    rejected = container.leave_service.reject_leave(leave.leave_id, "manager-1", "busy season")

    assert rejected.status == LeaveStatus.REJECTED
    assert rejected.rejection_reason == "busy season"


def test_approve_then_reject_stays_approved(container, ali):
    svc = container.leave_service
    leave = _new_leave(container, ali.employee_id)
    approved = svc.approve_leave(leave.leave_id, "manager-1")

    with pytest.raises(InvalidTransitionError):
        svc.reject_leave(leave.leave_id, "manager-2", "changed mind")

    assert svc.get_leave(leave.leave_id) == approved


def test_reject_then_approve_stays_rejected(container, ali):
    svc = container.leave_service
    leave = _new_leave(container, ali.employee_id)
    svc.reject_leave(leave.leave_id, "manager-1")

    with pytest.raises(InvalidTransitionError):
        svc.approve_leave(leave.leave_id, "manager-1")

    assert svc.get_leave(leave.leave_id).status == LeaveStatus.REJECTED


def test_decisions_on_missing_leave_raise_not_found(container):
    with pytest.raises(NotFoundError):
        container.leave_service.approve_leave("missing", "manager-1")
    with pytest.raises(NotFoundError):
        container.leave_service.reject_leave("missing", "manager-1")


def test_company_leaves_filter_by_status(container, acme, ali):
    svc = container.leave_service
    first = _new_leave(container, ali.employee_id)
    second = _new_leave(container, ali.employee_id)
    svc.approve_leave(first.leave_id, "manager-1")

    pending = svc.get_company_leaves(acme.company_id, LeaveStatus.PENDING)
    everything = svc.get_company_leaves(acme.company_id)

    assert [row.leave.leave_id for row in pending] == [second.leave_id]
    assert [row.leave.leave_id for row in everything] == [first.leave_id, second.leave_id]
    assert all(row.employee.employee_id == ali.employee_id for row in everything)


def test_concurrent_approvals_pick_a_single_winner(container, ali):
    leave = _new_leave(container, ali.employee_id)
    outcomes: list[str] = []
    lock = threading.Lock()

    def decide(approver: str):
        try:
            container.leave_service.approve_leave(leave.leave_id, approver)
            result = approver
        except InvalidTransitionError:
            result = "refused"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=decide, args=(f"manager-{i}",)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    winners = [o for o in outcomes if o != "refused"]
    assert len(winners) == 1
    assert container.leave_service.get_leave(leave.leave_id).approver_id == winners[0]
