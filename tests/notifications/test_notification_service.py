from __future__ import annotations

import pytest

from src.hrms_system.hrms_system.core.enums import NotificationType
from src.hrms_system.hrms_system.core.exceptions import ValidationError


def _notify(container, title: str, user_id: str = "u-1", **extra):
    data = {"user_id": user_id, "title": title, "message": f"{title} body"}
    data.update(extra)
    return container.notification_service.create_notification(data)


def test_create_notification_defaults_to_info_and_unread(container):
    n = _notify(container, "Welcome")

    assert n.notification_type == NotificationType.INFO
    assert n.read_at is None
    assert not n.is_read


def test_create_notification_validation(container):
    with pytest.raises(ValidationError):
        container.notification_service.create_notification({"user_id": "u-1", "title": "No message"})
    with pytest.raises(ValidationError):
        _notify(container, "Bad type", notification_type="urgent")


def test_notifications_newest_first_with_limit(container):
    titles = [f"n{i}" for i in range(5)]
    for title in titles:
        _notify(container, title)
    _notify(container, "someone else", user_id="u-2")

    svc = container.notification_service
    assert [n.title for n in svc.get_user_notifications("u-1")] == list(reversed(titles))
    assert [n.title for n in svc.get_user_notifications("u-1", limit=2)] == ["n4", "n3"]
    with pytest.raises(ValidationError):
        svc.get_user_notifications("u-1", limit=0)


def test_unread_count_respects_company_scope(container, acme):
    _notify(container, "global")
    scoped = _notify(container, "scoped", company_id=acme.company_id)
    svc = container.notification_service

    assert svc.get_unread_notification_count("u-1") == 2
    assert svc.get_unread_notification_count("u-1", company_id=acme.company_id) == 1

    svc.mark_notification_as_read(scoped.notification_id)

    assert svc.get_unread_notification_count("u-1") == 1
    assert svc.get_unread_notification_count("u-1", company_id=acme.company_id) == 0


def test_mark_as_read_keeps_first_timestamp_and_ignores_missing(container):
    svc = container.notification_service
    n = _notify(container, "hello")

    svc.mark_notification_as_read(n.notification_id)
    first = svc.get_user_notifications("u-1")[0].read_at
    svc.mark_notification_as_read(n.notification_id)
    svc.mark_notification_as_read("missing")

    assert first is not None
    assert svc.get_user_notifications("u-1")[0].read_at == first


def test_delete_notification_is_idempotent(container):
    svc = container.notification_service
    n = _notify(container, "bye")

    svc.delete_notification(n.notification_id)
    svc.delete_notification(n.notification_id)

    assert svc.get_user_notifications("u-1") == []
