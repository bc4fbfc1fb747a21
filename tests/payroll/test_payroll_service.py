from __future__ import annotations

import pytest

from bistro_staff.core.enums import NotificationType, PayrollStatus
from bistro_staff.core.results import TransitionOutcome


def _by_employee(items):
    return {i.employee_id: i for i in items}


def test_generate_builds_one_draft_per_employee(container):
    items = container.payroll_service.generate_payroll("2024-03")

    assert sorted(i.employee_id for i in items) == ["2", "3", "4"]
    assert all(i.status == PayrollStatus.DRAFT for i in items)

    jane = _by_employee(items)["2"]
    assert jane.regular_hours == pytest.approx(8.17)
    assert jane.regular_pay == pytest.approx(122.55)
    assert jane.total_pay == pytest.approx(122.55)
    assert _by_employee(items)["4"].total_pay == 0


def test_month_accepts_any_date_inside_it(container):
    items = container.payroll_service.generate_payroll("2024-03-17")

    assert items[0].period_start.isoformat() == "2024-03-01"
    assert items[0].period_end.isoformat() == "2024-03-31"


def test_regenerate_replaces_drafts(container):
    first = container.payroll_service.generate_payroll("2024-03")
    second = container.payroll_service.generate_payroll("2024-03")

    assert len(second) == 3
    assert not {i.payroll_id for i in first} & {i.payroll_id for i in second}
    assert len(container.payroll_service.get_payroll("2024-03")) == 3


def test_regenerate_keeps_processed_items(container):
    jane = _by_employee(container.payroll_service.generate_payroll("2024-03"))["2"]
    container.payroll_service.process_payroll(jane.payroll_id)

    items = _by_employee(container.payroll_service.generate_payroll("2024-03"))

    assert items["2"].payroll_id == jane.payroll_id
    assert items["2"].status == PayrollStatus.PROCESSED
    assert len(items) == 3


def test_bonus_awards_roll_into_payroll_once(container):
    container.bonus_service.apply_bonus("2", 2024, 120)

    jane = _by_employee(container.payroll_service.generate_payroll("2024-03"))["2"]
    assert jane.bonus_pay == 120.0
    assert jane.total_pay == pytest.approx(242.55)

    regenerated = _by_employee(container.payroll_service.generate_payroll("2024-03"))["2"]
    assert regenerated.bonus_pay == 120.0

    later = _by_employee(container.payroll_service.generate_payroll("2024-04"))["2"]
    assert later.bonus_pay == 0


def test_process_then_pay(container):
    jane = _by_employee(container.payroll_service.generate_payroll("2024-03"))["2"]

    processed = container.payroll_service.process_payroll(jane.payroll_id)
    paid = container.payroll_service.pay_payroll(jane.payroll_id)

    assert processed.entity.status == PayrollStatus.PROCESSED
    assert processed.entity.processed_date is not None
    assert paid.entity.status == PayrollStatus.PAID
    assert paid.entity.paid_date is not None

    latest = container.notification_service.list_for_user("2")[0]
    assert latest.notification_type == NotificationType.PAYMENT
    assert latest.title == "Payment Sent"


def test_status_must_advance_in_order(container):
    jane = _by_employee(container.payroll_service.generate_payroll("2024-03"))["2"]

    assert container.payroll_service.pay_payroll(jane.payroll_id).outcome == TransitionOutcome.INVALID_STATE
    container.payroll_service.process_payroll(jane.payroll_id)
    assert container.payroll_service.process_payroll(jane.payroll_id).outcome == TransitionOutcome.INVALID_STATE
    assert container.payroll_service.pay_payroll("pay-missing").outcome == TransitionOutcome.NOT_FOUND
