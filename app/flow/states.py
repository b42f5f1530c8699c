"""
app/flow/states.py

Purpose: Defines the vehicle service lifecycle

- Enum for each service status
  (WAITING, IN_PROGRESS, PAYMENT_PENDING, COMPLETED, CANCELLED)
- Single source of truth for status values and labels
- Status transition validation
- Which transitions notify the customer
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass


class ServiceStatus(str, Enum):
    """
    Defines all possible statuses of a vehicle in the wash queue.
    """

    WAITING = "waiting"
    IN_PROGRESS = "in-progress"
    PAYMENT_PENDING = "payment-pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class NotificationType(str, Enum):
    """Kinds of customer SMS a status change can trigger."""

    STATUS_UPDATE = "status_update"
    COMPLETION = "completion"


@dataclass(frozen=True)
class StatusMetadata:
    """
    Metadata associated with each service status.
    """
    name: ServiceStatus
    display_name: str
    notifies_customer: bool = True  # Whether entering this status sends an SMS
    is_terminal: bool = False  # No further transitions allowed
    description: str = ""


STATUS_METADATA: Dict[ServiceStatus, StatusMetadata] = {
    ServiceStatus.WAITING: StatusMetadata(
        name=ServiceStatus.WAITING,
        display_name="Waiting",
        description="Vehicle is queued and waiting for a crew"
    ),
    ServiceStatus.IN_PROGRESS: StatusMetadata(
        name=ServiceStatus.IN_PROGRESS,
        display_name="In Progress",
        description="Crew or package assigned and work has started"
    ),
    ServiceStatus.PAYMENT_PENDING: StatusMetadata(
        name=ServiceStatus.PAYMENT_PENDING,
        display_name="Ready for Payment",
        description="Final check done, waiting for payment and pickup"
    ),
    ServiceStatus.COMPLETED: StatusMetadata(
        name=ServiceStatus.COMPLETED,
        display_name="Completed",
        is_terminal=True,
        description="Paid and picked up"
    ),
    ServiceStatus.CANCELLED: StatusMetadata(
        name=ServiceStatus.CANCELLED,
        display_name="Cancelled",
        notifies_customer=False,
        is_terminal=True,
        description="Removed from the queue without service"
    ),
}


# Valid status transitions; staying in the same status is always allowed
STATUS_TRANSITIONS: Dict[ServiceStatus, List[ServiceStatus]] = {
    ServiceStatus.WAITING: [
        ServiceStatus.IN_PROGRESS,
        ServiceStatus.CANCELLED,
    ],
    ServiceStatus.IN_PROGRESS: [
        ServiceStatus.WAITING,  # Crew released, back to queue
        ServiceStatus.PAYMENT_PENDING,
        ServiceStatus.CANCELLED,
    ],
    ServiceStatus.PAYMENT_PENDING: [
        ServiceStatus.IN_PROGRESS,  # Failed final check
        ServiceStatus.COMPLETED,
        ServiceStatus.CANCELLED,
    ],
    ServiceStatus.COMPLETED: [],
    ServiceStatus.CANCELLED: [],
}


def parse_status(value) -> Optional[ServiceStatus]:
    """Returns the ServiceStatus for a raw value, or None if it is not one."""
    if isinstance(value, ServiceStatus):
        return value
    try:
        return ServiceStatus(value)
    except ValueError:
        return None


def is_valid_transition(from_status: ServiceStatus, to_status: ServiceStatus) -> bool:
    """
    Checks if a status transition is valid.

    Args:
        from_status: Current status
        to_status: Target status

    Returns:
        True if transition is allowed, False otherwise
    """
    if from_status == to_status:
        return True
    return to_status in STATUS_TRANSITIONS.get(from_status, [])


def notification_for_transition(previous, new) -> Optional[NotificationType]:
    """
    Decides which SMS, if any, a status change should send.

    Completion goes through the completion template; every other notifying
    status uses the status update templates. Unchanged status sends nothing.
    """
    new_status = parse_status(new)
    if new_status is None or parse_status(previous) == new_status:
        return None

    if not get_status_metadata(new_status).notifies_customer:
        return None

    if new_status == ServiceStatus.COMPLETED:
        return NotificationType.COMPLETION
    return NotificationType.STATUS_UPDATE


def get_status_metadata(status: ServiceStatus) -> StatusMetadata:
    """
    Retrieves metadata for a given status.
    """
    return STATUS_METADATA.get(status, StatusMetadata(
        name=status,
        display_name=str(status),
        description="Unknown status"
    ))


def get_status_label(status) -> str:
    """Display label for a status, e.g. "Ready for Payment"."""
    parsed = parse_status(status)
    if parsed is None:
        return str(status)
    return get_status_metadata(parsed).display_name
