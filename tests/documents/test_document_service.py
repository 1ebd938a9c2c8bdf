from __future__ import annotations

import pytest

from src.hrms_system.hrms_system.core.enums import DocumentType, EntityType
from src.hrms_system.hrms_system.core.exceptions import NotFoundError, ValidationError
from src.hrms_system.hrms_system.documents.model import (
    CompanyAttachment,
    EmployeeAttachment,
    LicenseAttachment,
    attachment_for,
)


def _doc(entity_type: str, entity_id: str, **extra):
    data = {
        "entity_type": entity_type,
        "entity_id": entity_id,
        "name": "passport",
        "document_type": "passport",
        "file_url": "/files/p.pdf",
    }
    data.update(extra)
    return data


def test_attachment_for_accepts_singular_and_plural_names():
    assert attachment_for("employee", "e1") == EmployeeAttachment("e1")
    assert attachment_for("companies", "c1") == CompanyAttachment("c1")
    assert attachment_for(EntityType.LICENSE, "l1") == LicenseAttachment("l1")
    assert EmployeeAttachment("x") != CompanyAttachment("x")
    with pytest.raises(ValidationError):
        attachment_for("department", "d1")
    with pytest.raises(ValidationError):
        attachment_for("employee", " ")


def test_create_document_for_employee(container, ali):
    doc = container.document_service.create_document(
        _doc("employee", ali.employee_id, file_size=2048, mime_type="application/pdf", expiry_date="2030-01-01"),
        "mgr",
    )

    assert doc.attachment == EmployeeAttachment(ali.employee_id)
    assert doc.attachment.entity_type == EntityType.EMPLOYEE
    assert doc.document_type == DocumentType.PASSPORT
    assert doc.uploaded_by == "mgr"
    assert doc.file_size == 2048
    assert container.document_service.get_document(doc.document_id) == doc


def test_documents_are_listed_per_attachment(container, acme, ali):
    svc = container.document_service
    on_employee = svc.create_document(_doc("employee", ali.employee_id), "mgr")
    on_company = svc.create_document(_doc("company", acme.company_id, document_type="contract"), "mgr")

    assert svc.get_entity_documents(EmployeeAttachment(ali.employee_id)) == [on_employee]
    assert svc.get_entity_documents(CompanyAttachment(acme.company_id)) == [on_company]
    assert svc.get_entity_documents(LicenseAttachment(acme.company_id)) == []


def test_create_document_needs_existing_target(container):
    with pytest.raises(NotFoundError):
        container.document_service.create_document(_doc("license", "missing"), "mgr")


def test_create_document_validation(container, ali):
    svc = container.document_service
    with pytest.raises(ValidationError):
        svc.create_document({"name": "x", "document_type": "other", "file_url": "/f"}, "mgr")
    with pytest.raises(ValidationError):
        svc.create_document(_doc("employee", ali.employee_id, document_type="selfie"), "mgr")
    with pytest.raises(ValidationError):
        svc.create_document(_doc("employee", ali.employee_id, file_size=-1), "mgr")
    with pytest.raises(ValidationError):
        svc.create_document(_doc("employee", ali.employee_id), "")


def test_update_and_delete_document(container, ali):
    svc = container.document_service
    doc = svc.create_document(_doc("employee", ali.employee_id), "mgr")

    updated = svc.update_document(doc.document_id, {"description": "renewed", "expiry_date": "2031-05-01"})
    assert updated.description == "renewed"
    assert updated.attachment == doc.attachment

    with pytest.raises(ValidationError):
        svc.update_document(doc.document_id, {"entity_id": "elsewhere"})
    with pytest.raises(NotFoundError):
        svc.update_document("missing", {"name": "x"})

    svc.delete_document(doc.document_id)
    svc.delete_document(doc.document_id)
    assert svc.get_document(doc.document_id) is None
