import pytest

from app.flow.states import (
    ServiceStatus,
    NotificationType,
    STATUS_TRANSITIONS,
    is_valid_transition,
    notification_for_transition,
    get_status_label,
    get_status_metadata,
    parse_status,
)
from utils.constants import SERVICE_STATUSES


def test_enum_matches_status_values():
    assert tuple(status.value for status in ServiceStatus) == SERVICE_STATUSES


def test_every_status_has_transitions():
    assert set(STATUS_TRANSITIONS) == set(ServiceStatus)


@pytest.mark.parametrize("from_status,to_status", [
    (ServiceStatus.WAITING, ServiceStatus.IN_PROGRESS),
    (ServiceStatus.IN_PROGRESS, ServiceStatus.WAITING),
    (ServiceStatus.IN_PROGRESS, ServiceStatus.PAYMENT_PENDING),
    (ServiceStatus.PAYMENT_PENDING, ServiceStatus.COMPLETED),
    (ServiceStatus.PAYMENT_PENDING, ServiceStatus.IN_PROGRESS),
    (ServiceStatus.WAITING, ServiceStatus.CANCELLED),
])
def test_valid_transitions(from_status, to_status):
    assert is_valid_transition(from_status, to_status)


@pytest.mark.parametrize("from_status,to_status", [
    (ServiceStatus.WAITING, ServiceStatus.COMPLETED),
    (ServiceStatus.WAITING, ServiceStatus.PAYMENT_PENDING),
    (ServiceStatus.COMPLETED, ServiceStatus.WAITING),
    (ServiceStatus.CANCELLED, ServiceStatus.IN_PROGRESS),
])
def test_invalid_transitions(from_status, to_status):
    assert not is_valid_transition(from_status, to_status)


def test_same_status_is_always_allowed():
    for status in ServiceStatus:
        assert is_valid_transition(status, status)


def test_terminal_statuses():
    assert get_status_metadata(ServiceStatus.COMPLETED).is_terminal
    assert get_status_metadata(ServiceStatus.CANCELLED).is_terminal
    assert not get_status_metadata(ServiceStatus.WAITING).is_terminal


def test_notification_for_transition():
    assert notification_for_transition("payment-pending", "completed") == NotificationType.COMPLETION
    assert notification_for_transition("waiting", "in-progress") == NotificationType.STATUS_UPDATE
    assert notification_for_transition("in-progress", "payment-pending") == NotificationType.STATUS_UPDATE
    assert notification_for_transition(None, "waiting") == NotificationType.STATUS_UPDATE


def test_no_notification_when_unchanged_or_cancelled():
    assert notification_for_transition("waiting", "waiting") is None
    assert notification_for_transition("waiting", "cancelled") is None
    assert notification_for_transition("waiting", "bogus") is None


def test_labels():
    assert get_status_label("payment-pending") == "Ready for Payment"
    assert get_status_label(ServiceStatus.IN_PROGRESS) == "In Progress"
    assert get_status_label("bogus") == "bogus"


def test_parse_status():
    assert parse_status("waiting") is ServiceStatus.WAITING
    assert parse_status(ServiceStatus.COMPLETED) is ServiceStatus.COMPLETED
    assert parse_status("done") is None
    assert parse_status(None) is None
