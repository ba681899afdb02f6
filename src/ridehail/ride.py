"""Ride state machine and models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ridehail.core.exceptions import StateError
from ridehail.models import Driver, FareBreakdown, Location, RideClass, RouteEstimate


class RideStatus(str, Enum):
    """Ride lifecycle states."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({RideStatus.COMPLETED, RideStatus.CANCELLED})

VALID_TRANSITIONS: dict[RideStatus, set[RideStatus]] = {
    RideStatus.PENDING: {RideStatus.ACCEPTED, RideStatus.CANCELLED},
    RideStatus.ACCEPTED: {RideStatus.IN_PROGRESS, RideStatus.CANCELLED},
    RideStatus.IN_PROGRESS: {RideStatus.COMPLETED, RideStatus.CANCELLED},
    RideStatus.COMPLETED: set(),
    RideStatus.CANCELLED: set(),
}

# Statuses for which a ride carries a driver / a pickup estimate.
DRIVER_STATUSES = frozenset({RideStatus.ACCEPTED, RideStatus.IN_PROGRESS})
PICKUP_ESTIMATE_STATUSES = frozenset({RideStatus.PENDING, RideStatus.ACCEPTED})


class RideRequest(BaseModel):
    """Caller-built request to book a ride."""

    model_config = ConfigDict(frozen=True)

    pickup: Location
    dropoff: Location
    ride_class: RideClass = RideClass.STANDARD
    notes: str | None = None
    fare: FareBreakdown | None = None
    route: RouteEstimate | None = None


class RideRecord(BaseModel):
    """Tracked ride with state machine logic."""

    ride_id: str
    status: RideStatus = Field(default=RideStatus.ACCEPTED)
    ride_class: RideClass = RideClass.STANDARD
    assigned_driver: Driver | None = None
    estimated_pickup_time: datetime | None = None
    requested_at: datetime | None = None
    fare: FareBreakdown | None = None
    route: RouteEstimate | None = None

    def transition_to(self, new_status: RideStatus) -> None:
        """Transition to a new status with validation."""
        if self.status.is_terminal:
            raise StateError(
                f"Cannot transition from terminal status {self.status.value}",
                details={"ride_id": self.ride_id},
            )

        if new_status not in VALID_TRANSITIONS[self.status]:
            raise StateError(
                f"Invalid transition from {self.status.value} to {new_status.value}",
                details={"ride_id": self.ride_id},
            )

        self.status = new_status

        if new_status not in DRIVER_STATUSES:
            self.assigned_driver = None
        if new_status not in PICKUP_ESTIMATE_STATUSES:
            self.estimated_pickup_time = None
