from __future__ import annotations

from datetime import timedelta

from src.hrms_system.hrms_system.core.enums import LeaveStatus
from src.hrms_system.hrms_system.companies.model import CompanyStats


def test_license_holder_shows_up_in_stats(container, acme, fixed_now):
    lic = container.license_service.create_license(
        acme.company_id,
        {"name": "L1", "expiry_date": (fixed_now + timedelta(days=10)).date().isoformat()},
    )
    ali = container.employee_service.create_employee(acme.company_id, {"full_name": "Ali"})
    container.employee_service.update_employee(ali.employee_id, {"license_id": lic.license_id})

    stats = container.company_service.get_company_stats(acme.company_id)

    assert stats == CompanyStats(total_employees=1, active_employees=1, pending_leaves=0, expiring_licenses=1)
    assert container.license_service.get_license(lic.license_id).employee_count == 1


def test_approving_a_leave_clears_pending_count(container, acme, ali):
    leave = container.leave_service.create_leave(
        {"employee_id": ali.employee_id, "start_date": "2024-06-10", "end_date": "2024-06-12"}
    )
    assert container.company_service.get_company_stats(acme.company_id).pending_leaves == 1

    approved = container.leave_service.approve_leave(leave.leave_id, "manager-1")

    assert approved.status == LeaveStatus.APPROVED
    assert approved.approver_id == "manager-1"
    assert container.company_service.get_company_stats(acme.company_id).pending_leaves == 0
