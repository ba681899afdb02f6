"""Tests for service wiring."""

import random
from datetime import datetime

import pytest

from ridehail.container import build_services
from ridehail.core.clock import fixed_clock
from ridehail.geo.locations import SAMPLE_LOCATIONS
from ridehail.models import RideClass
from ridehail.ride import RideRequest, RideStatus
from ridehail.settings import Settings, SimulationSettings


@pytest.fixture
def settings() -> Settings:
    return Settings(simulation=SimulationSettings(latency_multiplier=0.0, random_seed=7))


@pytest.mark.unit
class TestBuildServices:
    def test_services_share_dependencies(self, settings):
        services = build_services(settings)

        assert services.fares.route_engine is services.routes
        assert services.rides.driver_directory is services.drivers
        assert services.routes._rng is services.drivers._rng is services.rides._rng

    def test_settings_flow_into_services(self, settings):
        settings.notes.max_length = 50
        settings.fare.currency = "EUR"
        services = build_services(settings)

        assert services.notes.max_length == 50
        assert services.fares.currency == "EUR"
        assert services.drivers.max_drivers == settings.drivers.max_drivers
        assert services.locations.retry_config.max_attempts == settings.geocoding.max_attempts

    @pytest.mark.asyncio
    async def test_seeded_services_are_reproducible(self, settings):
        pickup = SAMPLE_LOCATIONS[0]

        first = await build_services(settings).drivers.find_nearby(pickup)
        second = await build_services(settings).drivers.find_nearby(pickup)

        assert [d.model_dump(exclude={"id"}) for d in first] == [
            d.model_dump(exclude={"id"}) for d in second
        ]

    @pytest.mark.asyncio
    async def test_booking_flow(self, settings):
        services = build_services(
            settings,
            rng=random.Random(1),
            clock=fixed_clock(datetime(2024, 5, 14, 8, 0)),
        )
        pickup, dropoff = SAMPLE_LOCATIONS[0], SAMPLE_LOCATIONS[1]

        route = await services.routes.compute_route(pickup, dropoff)
        fare = await services.fares.estimate_fare(pickup, dropoff, RideClass.BLESSED_XL, route)
        record = await services.rides.request_ride(
            RideRequest(
                pickup=pickup,
                dropoff=dropoff,
                ride_class=RideClass.BLESSED_XL,
                fare=fare,
                route=route,
            )
        )

        assert fare.surge_multiplier == 1.5
        assert record.status == RideStatus.ACCEPTED
        assert record.fare == fare
        assert record.assigned_driver.ride_class == RideClass.BLESSED_XL
