from __future__ import annotations

import threading

import pytest

from src.hrms_system.hrms_system.core.enums import CompanyRole
from src.hrms_system.hrms_system.core.exceptions import NotFoundError, ValidationError


def test_upsert_user_keeps_created_at(container):
    svc = container.user_service
    first = svc.upsert_user({"user_id": "u-1", "email": "a@example.com"})

    second = svc.upsert_user({"user_id": "u-1", "email": "b@example.com", "first_name": "Amal"})

    assert second.created_at == first.created_at
    assert second.updated_at > first.updated_at
    assert svc.get_user("u-1").email == "b@example.com"


def test_upsert_user_requires_id(container):
    with pytest.raises(ValidationError):
        container.user_service.upsert_user({"email": "a@example.com"})


def test_memberships_across_companies(container, acme):
    other = container.company_service.create_company({"name": "Other"})
    svc = container.user_service
    svc.upsert_user({"user_id": "u-1", "first_name": "Amal"})

    svc.add_user_to_company("u-1", acme.company_id, role="company_manager", permissions=["payroll"])
    svc.add_user_to_company("u-1", other.company_id)

    memberships = svc.get_user_companies("u-1")
    assert [(m.company_id, m.role) for m in memberships] == [
        (acme.company_id, CompanyRole.COMPANY_MANAGER),
        (other.company_id, CompanyRole.EMPLOYEE),
    ]
    [row] = svc.get_company_users(acme.company_id)
    assert row.user.first_name == "Amal"
    assert row.membership.permissions == ("payroll",)


def test_company_users_without_profile(container, acme):
    container.user_service.add_user_to_company("ghost", acme.company_id)

    [row] = container.user_service.get_company_users(acme.company_id)

    assert row.user is None


def test_add_user_to_company_rules(container, acme):
    svc = container.user_service
    svc.add_user_to_company("u-1", acme.company_id)

    with pytest.raises(ValidationError):
        svc.add_user_to_company("u-1", acme.company_id, role="supervisor")
    with pytest.raises(ValidationError):
        svc.add_user_to_company("u-2", acme.company_id, role="owner")
    with pytest.raises(NotFoundError):
        svc.add_user_to_company("u-2", "missing")


def test_update_user_role_keeps_permissions_when_not_given(container, acme):
    svc = container.user_service
    svc.add_user_to_company("u-1", acme.company_id, permissions=["leaves"])

    updated = svc.update_user_role("u-1", acme.company_id, "supervisor")
    assert updated.role == CompanyRole.SUPERVISOR
    assert updated.permissions == ("leaves",)

    replaced = svc.update_user_role("u-1", acme.company_id, "supervisor", permissions=[])
    assert replaced.permissions == ()

    with pytest.raises(NotFoundError):
        svc.update_user_role("u-9", acme.company_id, "worker")


def test_remove_user_from_company_is_idempotent(container, acme):
    svc = container.user_service
    svc.add_user_to_company("u-1", acme.company_id)

    svc.remove_user_from_company("u-1", acme.company_id)
    svc.remove_user_from_company("u-1", acme.company_id)

    assert svc.get_company_users(acme.company_id) == []


def test_concurrent_joins_store_a_single_membership(container, acme):
    svc = container.user_service
    outcomes: list[str] = []
    lock = threading.Lock()
    start = threading.Barrier(8)

    def join():
        start.wait()
        try:
            svc.add_user_to_company("u-1", acme.company_id)
            result = "joined"
        except ValidationError:
            result = "refused"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=join) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("joined") == 1
    assert len(svc.get_company_users(acme.company_id)) == 1
