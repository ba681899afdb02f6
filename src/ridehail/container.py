"""Service wiring: every service is built once and handed to its consumers."""

import random
from dataclasses import dataclass

from ridehail.core.clock import Clock, system_clock
from ridehail.core.exceptions import UpstreamUnavailableError
from ridehail.core.latency import LatencySimulator
from ridehail.core.retry import RetryConfig
from ridehail.geo.locations import Geocoder, LocationService, SampleGeocoder
from ridehail.matching.driver_directory import DriverDirectory
from ridehail.matching.faker_provider import create_faker_instance
from ridehail.notes.analyzer import NotesAnalyzer
from ridehail.orchestration.ride_orchestrator import RideOrchestrator
from ridehail.pricing.fare_engine import FareEngine
from ridehail.routing.route_engine import RouteEngine
from ridehail.settings import Settings


@dataclass(frozen=True)
class RideServices:
    locations: LocationService
    routes: RouteEngine
    fares: FareEngine
    drivers: DriverDirectory
    notes: NotesAnalyzer
    rides: RideOrchestrator


def build_services(
    settings: Settings,
    rng: random.Random | None = None,
    clock: Clock = system_clock,
    geocoder: Geocoder | None = None,
) -> RideServices:
    """Construct the service graph from settings.

    One random generator and one clock are shared by all services; pass
    seeded or pinned ones to make results reproducible.
    """
    seed = settings.simulation.random_seed
    if rng is None:
        rng = random.Random(seed)
    latency = LatencySimulator(settings.simulation.latency_multiplier)

    routes = RouteEngine(
        rng=rng,
        latency=latency,
        average_speed_kmh=settings.route.average_speed_kmh,
        path_jitter_degrees=settings.route.path_jitter_degrees,
        path_precision=settings.route.path_precision,
    )
    fares = FareEngine(
        route_engine=routes,
        latency=latency,
        clock=clock,
        currency=settings.fare.currency,
    )
    drivers = DriverDirectory(
        rng=rng,
        latency=latency,
        fake=create_faker_instance(seed, locale=settings.drivers.faker_locale),
        min_drivers=settings.drivers.min_drivers,
        max_drivers=settings.drivers.max_drivers,
        search_radius_degrees=settings.drivers.search_radius_degrees,
        movement_jitter_degrees=settings.drivers.movement_jitter_degrees,
    )
    locations = LocationService(
        geocoder=geocoder or SampleGeocoder(rng),
        latency=latency,
        retry_config=RetryConfig(
            max_attempts=settings.geocoding.max_attempts,
            base_delay=settings.geocoding.retry_base_delay,
            multiplier=settings.geocoding.retry_multiplier,
            retryable_exceptions=(UpstreamUnavailableError,),
        ),
    )

    return RideServices(
        locations=locations,
        routes=routes,
        fares=fares,
        drivers=drivers,
        notes=NotesAnalyzer(latency=latency, max_length=settings.notes.max_length),
        rides=RideOrchestrator(driver_directory=drivers, rng=rng, latency=latency, clock=clock),
    )
