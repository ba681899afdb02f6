import random
from datetime import datetime

import pytest

from ridehail.core.clock import fixed_clock
from ridehail.core.latency import LatencySimulator
from ridehail.matching.driver_directory import DriverDirectory
from ridehail.matching.faker_provider import create_faker_instance
from ridehail.models import Location
from ridehail.notes.analyzer import NotesAnalyzer
from ridehail.orchestration.ride_orchestrator import RideOrchestrator
from ridehail.pricing.fare_engine import FareEngine
from ridehail.routing.route_engine import RouteEngine
from tests.factories import RideFactory

SEED = 42

# Lower Manhattan to Rockefeller Plaza.
NYC_ORIGIN = Location(lat=40.7128, lng=-74.0060, address="123 Broadway, New York, NY")
NYC_DESTINATION = Location(lat=40.7580, lng=-73.9855, address="30 Rockefeller Plaza, New York, NY")

# 03:00 falls outside every surge band.
OFF_PEAK = datetime(2024, 5, 14, 3, 0)


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for deterministic simulations."""
    return random.Random(SEED)


@pytest.fixture
def fake():
    """Seeded Faker instance for deterministic driver identities."""
    return create_faker_instance(seed=SEED)


@pytest.fixture
def no_latency() -> LatencySimulator:
    return LatencySimulator(multiplier=0.0)


@pytest.fixture
def ride_factory() -> RideFactory:
    return RideFactory(seed=SEED)


@pytest.fixture
def origin() -> Location:
    return NYC_ORIGIN


@pytest.fixture
def destination() -> Location:
    return NYC_DESTINATION


@pytest.fixture
def route_engine(rng, no_latency) -> RouteEngine:
    return RouteEngine(rng=rng, latency=no_latency)


@pytest.fixture
def off_peak_fare_engine(route_engine, no_latency) -> FareEngine:
    return FareEngine(route_engine=route_engine, latency=no_latency, clock=fixed_clock(OFF_PEAK))


@pytest.fixture
def driver_directory(rng, no_latency, fake) -> DriverDirectory:
    return DriverDirectory(rng=rng, latency=no_latency, fake=fake)


@pytest.fixture
def notes_analyzer(no_latency) -> NotesAnalyzer:
    return NotesAnalyzer(latency=no_latency)


@pytest.fixture
def orchestrator(driver_directory, rng, no_latency) -> RideOrchestrator:
    return RideOrchestrator(
        driver_directory=driver_directory,
        rng=rng,
        latency=no_latency,
        clock=fixed_clock(OFF_PEAK),
    )
