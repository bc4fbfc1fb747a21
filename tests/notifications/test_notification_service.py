from __future__ import annotations

from bistro_staff.core.enums import NotificationType
from bistro_staff.core.results import TransitionOutcome


def test_notify_appends_unread_entry(container):
    n = container.notification_service.notify(
        user_id="3", title="Hello", message="Welcome", notification_type=NotificationType.GENERAL
    )

    assert n.read is False
    assert container.notification_service.list_for_user("3") == [n]
    assert container.notification_service.list_for_user("2") == []


def test_newest_first(container):
    first = container.notification_service.notify(user_id="3", title="1", message="first")
    second = container.notification_service.notify(user_id="3", title="2", message="second")

    assert container.notification_service.list_for_user("3") == [second, first]


def test_mark_as_read(container):
    n = container.notification_service.notify(user_id="3", title="Hello", message="Welcome")

    assert container.notification_service.mark_notification_as_read(n.notification_id).applied
    again = container.notification_service.mark_notification_as_read(n.notification_id)

    assert again.outcome == TransitionOutcome.ALREADY_READ
    assert container.notification_service.mark_notification_as_read("nope").outcome == TransitionOutcome.NOT_FOUND
    assert container.notification_service.list_for_user("3", unread_only=True) == []


def test_mark_all_as_read_counts_changes(container):
    for i in range(3):
        container.notification_service.notify(user_id="3", title=str(i), message="m")
    container.notification_service.notify(user_id="4", title="x", message="m")

    assert container.notification_service.mark_all_as_read("3") == 3
    assert container.notification_service.mark_all_as_read("3") == 0
    assert len(container.notification_service.list_for_user("4", unread_only=True)) == 1


def test_mark_all_as_read_writes_once(container, backend):
    for i in range(3):
        container.notification_service.notify(user_id="3", title=str(i), message="m")
    saves = backend.save_count

    container.notification_service.mark_all_as_read("3")
    assert backend.save_count == saves + 1

    container.notification_service.mark_all_as_read("3")
    assert backend.save_count == saves + 1
