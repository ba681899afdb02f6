"""Simulated pool of nearby drivers."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING
from uuid import uuid4

from ridehail.core.latency import LatencySimulator
from ridehail.geo.distance import clamp_coordinate, validate_coordinate
from ridehail.matching.faker_provider import create_faker_instance
from ridehail.models import Coordinate, Driver, RideClass

if TYPE_CHECKING:
    from faker.proxy import Faker

logger = logging.getLogger(__name__)

# Reference point for drivers looked up by id (lower Manhattan).
REFERENCE_POINT = Coordinate(lat=40.7128, lng=-74.0060)
LOOKUP_JITTER_DEGREES = 0.005

MIN_RATING = 3.5
MAX_RATING = 5.0
MIN_ETA_MINUTES = 1
MAX_ETA_MINUTES = 10


class DriverDirectory:
    """Generates drivers around a location on every query.

    Nothing is stored between calls: each query synthesizes a fresh pool.
    Results keep generation order; they are not ranked by distance or ETA.
    """

    def __init__(
        self,
        rng: random.Random,
        latency: LatencySimulator,
        fake: Faker | None = None,
        min_drivers: int = 3,
        max_drivers: int = 7,
        search_radius_degrees: float = 0.01,
        movement_jitter_degrees: float = 0.0025,
    ):
        self._rng = rng
        self.latency = latency
        self.fake = fake if fake is not None else create_faker_instance()
        self.min_drivers = min_drivers
        self.max_drivers = max_drivers
        self.search_radius_degrees = search_radius_degrees
        self.movement_jitter_degrees = movement_jitter_degrees

    async def find_nearby(
        self, location: Coordinate, ride_class: RideClass | None = None
    ) -> list[Driver]:
        """Drivers within the search radius, optionally of one ride class.

        Classes are assigned before filtering, so a class filter can return
        fewer drivers than were generated.
        """
        await self.latency.delay(800)
        validate_coordinate(location.lat, location.lng)

        count = self._rng.randint(self.min_drivers, self.max_drivers)
        drivers = [
            self._generate_driver(
                location,
                ride_class or self._random_ride_class(),
                self.search_radius_degrees,
                driver_id=f"driver-{index}-{uuid4().hex[:12]}",
            )
            for index in range(count)
        ]

        if ride_class is not None:
            drivers = [driver for driver in drivers if driver.ride_class == ride_class]

        logger.debug(f"Found {len(drivers)} nearby drivers of {count} generated")
        return drivers

    async def lookup(self, driver_id: str) -> Driver:
        await self.latency.delay(300)
        return self._generate_driver(
            REFERENCE_POINT,
            self._random_ride_class(),
            LOOKUP_JITTER_DEGREES,
            driver_id=driver_id,
        )

    async def advance(self, drivers: list[Driver]) -> list[Driver]:
        """Move each driver slightly and count its ETA down by a minute."""
        await self.latency.delay(500)
        return [self._move(driver) for driver in drivers]

    def _move(self, driver: Driver) -> Driver:
        lat, lng = clamp_coordinate(
            driver.position.lat + self._jitter(self.movement_jitter_degrees),
            driver.position.lng + self._jitter(self.movement_jitter_degrees),
        )
        return driver.model_copy(
            update={
                "position": Coordinate(lat=lat, lng=lng),
                "eta_minutes": max(MIN_ETA_MINUTES, driver.eta_minutes - 1),
            }
        )

    def _generate_driver(
        self,
        center: Coordinate,
        ride_class: RideClass,
        radius_degrees: float,
        driver_id: str,
    ) -> Driver:
        lat, lng = clamp_coordinate(
            center.lat + self._jitter(radius_degrees),
            center.lng + self._jitter(radius_degrees),
        )
        return Driver(
            id=driver_id,
            position=Coordinate(lat=lat, lng=lng),
            ride_class=ride_class,
            name=self.fake.driver_name(),
            rating=round(self._rng.uniform(MIN_RATING, MAX_RATING), 1),
            vehicle_description=self.fake.vehicle_for_class(ride_class),
            eta_minutes=self._rng.randint(MIN_ETA_MINUTES, MAX_ETA_MINUTES),
        )

    def _random_ride_class(self) -> RideClass:
        return self._rng.choice(list(RideClass))

    def _jitter(self, max_degrees: float) -> float:
        return self._rng.uniform(-max_degrees, max_degrees)
