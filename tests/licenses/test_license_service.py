from __future__ import annotations

import pytest

from src.hrms_system.hrms_system.core.enums import LicenseStatus, LicenseType
from src.hrms_system.hrms_system.core.exceptions import NotFoundError, ValidationError
from src.hrms_system.hrms_system.documents.model import LicenseAttachment


def _attach(container, license_id: str):
    return container.document_service.create_document(
        {
            "entity_type": "license",
            "entity_id": license_id,
            "name": "scan",
            "document_type": "license",
            "file_url": "/files/scan.pdf",
        },
        "mgr",
    )


def test_create_license_defaults(container, acme):
    lic = container.license_service.create_license(acme.company_id, {"name": "Main", "expiry_date": "2025-01-31"})

    assert lic.company_id == acme.company_id
    assert lic.license_type == LicenseType.MAIN
    assert lic.status == LicenseStatus.ACTIVE
    assert lic.expiry_date.isoformat() == "2025-01-31"


def test_create_license_validation(container, acme):
    svc = container.license_service
    with pytest.raises(NotFoundError):
        svc.create_license("missing", {"name": "Main"})
    with pytest.raises(ValidationError):
        svc.create_license(acme.company_id, {"license_number": "123"})
    with pytest.raises(ValidationError):
        svc.create_license(acme.company_id, {"name": "Main", "expiry_date": "31/01/2025"})
    with pytest.raises(ValidationError):
        svc.create_license(acme.company_id, {"name": "Main", "issue_date": "2025-02-01", "expiry_date": "2025-01-01"})


def test_get_license_details(container, acme, ali):
    lic = container.license_service.create_license(acme.company_id, {"name": "Main", "license_type": "branch"})
    container.employee_service.update_employee(ali.employee_id, {"license_id": lic.license_id})
    doc = _attach(container, lic.license_id)

    details = container.license_service.get_license(lic.license_id)

    assert details.license == lic
    assert details.company == acme
    assert details.employee_count == 1
    assert [e.employee_id for e in details.employees] == [ali.employee_id]
    assert details.documents == [doc]


def test_get_missing_license_returns_none(container):
    assert container.license_service.get_license("missing") is None


def test_update_license(container, acme):
    lic = container.license_service.create_license(acme.company_id, {"name": "Main"})

    updated = container.license_service.update_license(lic.license_id, {"status": "expired", "license_number": "X-1"})

    assert updated.status == LicenseStatus.EXPIRED
    assert updated.license_number == "X-1"
    with pytest.raises(NotFoundError):
        container.license_service.update_license("missing", {"name": "x"})


def test_delete_license_detaches_holders_and_removes_documents(container, acme, ali):
    svc = container.license_service
    lic = svc.create_license(acme.company_id, {"name": "Main"})
    container.employee_service.update_employee(ali.employee_id, {"license_id": lic.license_id})
    _attach(container, lic.license_id)

    svc.delete_license(lic.license_id)

    assert svc.get_license(lic.license_id) is None
    assert container.employee_service.get_employee(ali.employee_id).employee.license_id is None
    assert list(container.document_service.get_entity_documents(LicenseAttachment(lic.license_id))) == []


def test_delete_license_twice_does_not_raise(container, acme):
    lic = container.license_service.create_license(acme.company_id, {"name": "Main"})

    container.license_service.delete_license(lic.license_id)
    container.license_service.delete_license(lic.license_id)

    assert container.license_service.get_license(lic.license_id) is None
