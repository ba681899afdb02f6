"""Ride request orchestration: driver assignment and status tracking."""

import logging
import random
from datetime import timedelta
from uuid import uuid4

from ridehail.core.clock import Clock, system_clock
from ridehail.core.exceptions import InvalidInputError
from ridehail.core.latency import LatencySimulator
from ridehail.geo.distance import clamp_coordinate, validate_coordinate
from ridehail.matching.driver_directory import REFERENCE_POINT, DriverDirectory
from ridehail.models import CancellationResult, Coordinate, Driver, RideClass
from ridehail.ride import (
    DRIVER_STATUSES,
    PICKUP_ESTIMATE_STATUSES,
    RideRecord,
    RideRequest,
    RideStatus,
)
from ridehail.ride_logging import log_ride_context

logger = logging.getLogger(__name__)

# Order matters: the status checksum indexes into this tuple.
SIMULATED_STATUSES = (
    RideStatus.PENDING,
    RideStatus.ACCEPTED,
    RideStatus.IN_PROGRESS,
    RideStatus.COMPLETED,
)

FALLBACK_DRIVER_NAME = "Available Driver"
FALLBACK_VEHICLE = "Toyota Camry"
FALLBACK_RATING = 4.8
FALLBACK_RADIUS_DEGREES = 0.01
FALLBACK_MIN_ETA = 5
FALLBACK_MAX_ETA = 10
DEFAULT_PICKUP_MINUTES = 5


def status_for_ride_id(ride_id: str) -> RideStatus:
    """Derive a reproducible status from the ride id's character codes.

    Stands in for persisted ride state in the simulated backend.
    """
    checksum = sum(ord(char) for char in ride_id)
    return SIMULATED_STATUSES[checksum % len(SIMULATED_STATUSES)]


class RideOrchestrator:
    """Accepts ride requests, assigns drivers and reports ride status.

    The simulated backend auto-accepts every request and always assigns a
    driver, synthesizing a fallback one when nobody is nearby.
    """

    def __init__(
        self,
        driver_directory: DriverDirectory,
        rng: random.Random,
        latency: LatencySimulator,
        clock: Clock = system_clock,
    ):
        self.driver_directory = driver_directory
        self._rng = rng
        self.latency = latency
        self.clock = clock

    async def request_ride(self, request: RideRequest) -> RideRecord:
        await self.latency.delay(1500)
        self._validate_request(request)
        ride_id = f"ride-{uuid4().hex}"

        with log_ride_context(ride_id, ride_class=request.ride_class.value):
            candidates = await self.driver_directory.find_nearby(
                request.pickup, request.ride_class
            )
            if candidates:
                driver = candidates[0]
            else:
                logger.warning("No nearby drivers, assigning fallback driver")
                driver = self._fallback_driver(request.pickup, request.ride_class)

            now = self.clock()
            record = RideRecord(
                ride_id=ride_id,
                status=RideStatus.ACCEPTED,
                ride_class=request.ride_class,
                assigned_driver=driver,
                estimated_pickup_time=now + timedelta(minutes=driver.eta_minutes),
                requested_at=now,
                fare=request.fare,
                route=request.route,
            )
            logger.info(f"Ride accepted, driver {driver.id} arriving in {driver.eta_minutes} min")
            return record

    async def get_status(self, ride_id: str) -> RideRecord:
        await self.latency.delay(500)
        status = status_for_ride_id(ride_id)

        driver = None
        if status in DRIVER_STATUSES:
            driver = self._fallback_driver(REFERENCE_POINT, RideClass.STANDARD)

        estimated_pickup_time = None
        if status in PICKUP_ESTIMATE_STATUSES:
            minutes = driver.eta_minutes if driver else DEFAULT_PICKUP_MINUTES
            estimated_pickup_time = self.clock() + timedelta(minutes=minutes)

        return RideRecord(
            ride_id=ride_id,
            status=status,
            assigned_driver=driver,
            estimated_pickup_time=estimated_pickup_time,
        )

    async def cancel_ride(self, ride_id: str) -> CancellationResult:
        """Cancel a ride. Always succeeds against the simulated backend."""
        await self.latency.delay(800)
        with log_ride_context(ride_id):
            logger.info("Ride cancelled")
        return CancellationResult(ride_id=ride_id, success=True)

    def transition(self, record: RideRecord, status: RideStatus) -> RideRecord:
        """Return a copy of ``record`` moved to ``status``.

        Raises StateError for moves the ride state machine does not allow,
        including any move out of completed or cancelled.
        """
        updated = record.model_copy(deep=True)
        updated.transition_to(status)
        with log_ride_context(record.ride_id):
            logger.info(f"Ride {record.status.value} -> {status.value}")
        return updated

    def _validate_request(self, request: RideRequest) -> None:
        for label, location in (("pickup", request.pickup), ("dropoff", request.dropoff)):
            try:
                validate_coordinate(location.lat, location.lng)
            except InvalidInputError as e:
                raise InvalidInputError(f"Invalid {label}: {e.message}", details=e.details) from e

    def _fallback_driver(self, location: Coordinate, ride_class: RideClass) -> Driver:
        lat, lng = clamp_coordinate(
            location.lat + self._rng.uniform(-FALLBACK_RADIUS_DEGREES, FALLBACK_RADIUS_DEGREES),
            location.lng + self._rng.uniform(-FALLBACK_RADIUS_DEGREES, FALLBACK_RADIUS_DEGREES),
        )
        return Driver(
            id=f"driver-fallback-{uuid4().hex[:12]}",
            position=Coordinate(lat=lat, lng=lng),
            ride_class=ride_class,
            name=FALLBACK_DRIVER_NAME,
            rating=FALLBACK_RATING,
            vehicle_description=FALLBACK_VEHICLE,
            eta_minutes=self._rng.randint(FALLBACK_MIN_ETA, FALLBACK_MAX_ETA),
        )
