"""Fare estimation per ride class with time-of-day surge."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ridehail.core.clock import Clock, system_clock
from ridehail.core.latency import LatencySimulator
from ridehail.core.rounding import round_money
from ridehail.models import FareBreakdown, Location, RideClass, RouteEstimate
from ridehail.pricing.surge import surge_multiplier_at
from ridehail.routing.route_engine import RouteEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FareRate:
    base: float
    per_km: float
    per_minute: float


RATE_TABLE: Mapping[RideClass, FareRate] = MappingProxyType(
    {
        RideClass.STANDARD: FareRate(base=5.0, per_km=1.5, per_minute=0.2),
        RideClass.BLESSED_XL: FareRate(base=8.0, per_km=2.0, per_minute=0.3),
        RideClass.LOCAL_LO: FareRate(base=3.0, per_km=1.0, per_minute=0.15),
    }
)


class FareEngine:
    """Prices routes for each ride class.

    Fares are computed from the route estimate at request time: a fixed base,
    a per-km and per-minute charge, and a surge component on top of their sum.
    """

    def __init__(
        self,
        route_engine: RouteEngine,
        latency: LatencySimulator,
        clock: Clock = system_clock,
        currency: str = "USD",
        rates: Mapping[RideClass, FareRate] = RATE_TABLE,
    ):
        self.route_engine = route_engine
        self.latency = latency
        self.clock = clock
        self.currency = currency
        self.rates = rates

    async def estimate_fare(
        self,
        origin: Location,
        destination: Location,
        ride_class: RideClass = RideClass.STANDARD,
        route: RouteEstimate | None = None,
    ) -> FareBreakdown:
        await self.latency.delay(600)
        if route is None:
            route = await self.route_engine.compute_route(origin, destination)

        fare = self.price(route, ride_class, surge_multiplier_at(self.clock()))
        logger.debug(f"Estimated {ride_class.value} fare: {fare.total} {fare.currency}")
        return fare

    async def compare_fares(
        self, origin: Location, destination: Location
    ) -> dict[RideClass, FareBreakdown]:
        """Price one shared route under every ride class."""
        await self.latency.delay(800)
        route = await self.route_engine.compute_route(origin, destination)
        multiplier = surge_multiplier_at(self.clock())

        return {ride_class: self.price(route, ride_class, multiplier) for ride_class in RideClass}

    def price(
        self, route: RouteEstimate, ride_class: RideClass, surge_multiplier: float
    ) -> FareBreakdown:
        """Price a route; the total is the sum of the rounded components."""
        if surge_multiplier < 1.0:
            raise ValueError("Surge multiplier must be >= 1.0")

        rate = self.rates[ride_class]
        base = rate.base
        distance_component = route.distance_km * rate.per_km
        time_component = route.duration_minutes * rate.per_minute

        surge_component = 0.0
        if surge_multiplier > 1.0:
            surge_component = (base + distance_component + time_component) * (
                surge_multiplier - 1.0
            )

        components = [
            round_money(value)
            for value in (base, distance_component, time_component, surge_component)
        ]
        return FareBreakdown(
            total=round_money(sum(components)),
            base=components[0],
            distance_component=components[1],
            time_component=components[2],
            surge_component=components[3],
            currency=self.currency,
            ride_class=ride_class,
            surge_multiplier=surge_multiplier,
        )
