from __future__ import annotations

from datetime import timedelta

import pytest

from src.hrms_system.hrms_system.core.enums import CompanyStatus, EmployeeStatus
from src.hrms_system.hrms_system.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.hrms_system.hrms_system.documents.model import CompanyAttachment


def test_create_company_stamps_ids_and_timestamps(container):
    company = container.company_service.create_company({"name": "  Acme  ", "industry": "IT"})

    assert company.company_id
    assert company.name == "Acme"
    assert company.status == CompanyStatus.ACTIVE
    assert company.created_at == company.updated_at
    assert container.company_service.get_company(company.company_id) == company


def test_create_company_requires_name(container):
    with pytest.raises(ValidationError):
        container.company_service.create_company({"industry": "IT"})
    with pytest.raises(ValidationError):
        container.company_service.create_company({"name": "   "})


def test_create_company_rejects_unknown_fields(container):
    with pytest.raises(ValidationError) as exc:
        container.company_service.create_company({"name": "Acme", "size": "large"})
    assert "size" in str(exc.value)


def test_update_company_merges_and_restamps(container, acme):
    updated = container.company_service.update_company(acme.company_id, {"status": "suspended"})

    assert updated.status == CompanyStatus.SUSPENDED
    assert updated.name == "Acme"
    assert updated.created_at == acme.created_at
    assert updated.updated_at > acme.updated_at


def test_update_missing_company_never_creates(container):
    with pytest.raises(NotFoundError):
        container.company_service.update_company("missing", {"name": "Ghost"})
    assert container.company_service.get_company("missing") is None
    assert list(container.company_service.get_all_companies()) == []


def test_update_company_cannot_touch_identity(container, acme):
    with pytest.raises(ValidationError):
        container.company_service.update_company(acme.company_id, {"company_id": "other"})
    with pytest.raises(ValidationError):
        container.company_service.update_company(acme.company_id, {"created_at": "2020-01-01"})


def test_list_companies_with_stats_excludes_archived_from_counts(container, acme):
    svc = container.employee_service
    svc.create_employee(acme.company_id, {"full_name": "Ali"})
    svc.create_employee(acme.company_id, {"full_name": "Sara", "status": "on_leave"})
    gone = svc.create_employee(acme.company_id, {"full_name": "Omar"})
    svc.archive_employee(gone.employee_id, "resigned")
    container.license_service.create_license(acme.company_id, {"name": "L1"})

    [row] = container.company_service.list_companies_with_stats()

    assert row.company == acme
    assert row.employee_count == 2
    assert row.active_employees == 1
    assert row.license_count == 1


def test_company_stats_match_listings(container, acme):
    svc = container.employee_service
    svc.create_employee(acme.company_id, {"full_name": "Ali"})
    svc.create_employee(acme.company_id, {"full_name": "Sara", "status": "inactive"})
    gone = svc.create_employee(acme.company_id, {"full_name": "Omar"})
    svc.archive_employee(gone.employee_id, "contract ended")

    stats = container.company_service.get_company_stats(acme.company_id)
    everyone = svc.get_company_employees(acme.company_id, include_archived=True)

    assert stats.total_employees == len(everyone) == 3
    assert stats.active_employees == sum(1 for e in everyone if e.status == EmployeeStatus.ACTIVE) == 1


def test_company_stats_are_scoped_to_the_company(container, acme):
    other = container.company_service.create_company({"name": "Other"})
    mine = container.employee_service.create_employee(acme.company_id, {"full_name": "Ali"})
    theirs = container.employee_service.create_employee(other.company_id, {"full_name": "Bob"})
    for emp in (mine, theirs):
        container.leave_service.create_leave(
            {"employee_id": emp.employee_id, "start_date": "2024-06-10", "end_date": "2024-06-11"}
        )

    stats = container.company_service.get_company_stats(acme.company_id)

    assert stats.total_employees == 1
    assert stats.pending_leaves == 1


def test_expiring_license_boundary_is_thirty_days(container, acme, fixed_now):
    svc = container.license_service
    svc.create_license(acme.company_id, {"name": "exactly 30", "expiry_date": (fixed_now + timedelta(days=30)).date()})
    svc.create_license(acme.company_id, {"name": "31 days", "expiry_date": (fixed_now + timedelta(days=31)).date()})
    svc.create_license(acme.company_id, {"name": "expired", "expiry_date": (fixed_now - timedelta(days=3)).date()})
    svc.create_license(acme.company_id, {"name": "no expiry"})

    stats = container.company_service.get_company_stats(acme.company_id, now=fixed_now)

    assert stats.expiring_licenses == 2


def test_system_stats_count_all_tenants(container, acme, fixed_now):
    other = container.company_service.create_company({"name": "Other"})
    container.employee_service.create_employee(acme.company_id, {"full_name": "Ali"})
    gone = container.employee_service.create_employee(other.company_id, {"full_name": "Bob"})
    container.employee_service.archive_employee(gone.employee_id, "left")
    container.license_service.create_license(other.company_id, {"name": "L", "expiry_date": fixed_now.date()})

    stats = container.company_service.get_system_stats(now=fixed_now)

    assert stats.total_companies == 2
    assert stats.total_employees == 1
    assert stats.total_licenses == 1
    assert stats.expiring_licenses == 1


def test_delete_company_is_refused_while_it_owns_employees(container, acme, ali):
    container.employee_service.archive_employee(ali.employee_id, "left")

    with pytest.raises(ConflictError):
        container.company_service.delete_company(acme.company_id)
    assert container.company_service.get_company(acme.company_id) is not None


def test_delete_company_is_refused_while_it_owns_licenses(container, acme):
    container.license_service.create_license(acme.company_id, {"name": "L1"})

    with pytest.raises(ConflictError):
        container.company_service.delete_company(acme.company_id)


def test_delete_company_clears_memberships_documents_and_notifications(container, acme):
    container.user_service.add_user_to_company("u-1", acme.company_id, role="company_manager")
    container.document_service.create_document(
        {
            "entity_type": "company",
            "entity_id": acme.company_id,
            "name": "CR",
            "document_type": "certificate",
            "file_url": "/files/cr.pdf",
        },
        "u-1",
    )
    container.notification_service.create_notification(
        {"user_id": "u-1", "company_id": acme.company_id, "title": "Hi", "message": "Welcome"}
    )

    container.company_service.delete_company(acme.company_id)

    assert container.company_service.get_company(acme.company_id) is None
    assert container.user_service.get_company_users(acme.company_id) == []
    assert list(container.document_service.get_entity_documents(CompanyAttachment(acme.company_id))) == []
    assert container.notification_service.get_unread_notification_count("u-1") == 0


def test_delete_company_is_idempotent(container, acme):
    container.company_service.delete_company(acme.company_id)
    container.company_service.delete_company(acme.company_id)
    container.company_service.delete_company("never-existed")
