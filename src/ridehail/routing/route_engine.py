"""Straight-line route estimates between two locations."""

import logging
import random

from ridehail.core.latency import LatencySimulator
from ridehail.core.rounding import round_half_up, round_minutes
from ridehail.geo.distance import haversine_distance_km, validate_coordinate
from ridehail.geo.path import DEFAULT_PRECISION, decode_path, encode_path, synthesize_path
from ridehail.models import Coordinate, Location, RouteEstimate

logger = logging.getLogger(__name__)

DEFAULT_AVERAGE_SPEED_KMH = 30.0


class RouteEngine:
    """Estimates distance, travel time and a drawable path.

    Distance is great-circle, not road-network; travel time assumes a fixed
    average speed.
    """

    def __init__(
        self,
        rng: random.Random,
        latency: LatencySimulator,
        average_speed_kmh: float = DEFAULT_AVERAGE_SPEED_KMH,
        path_jitter_degrees: float = 0.005,
        path_precision: int = DEFAULT_PRECISION,
    ):
        self._rng = rng
        self.latency = latency
        self.average_speed_kmh = average_speed_kmh
        self.path_jitter_degrees = path_jitter_degrees
        self.path_precision = path_precision

    async def compute_route(self, origin: Location, destination: Location) -> RouteEstimate:
        await self.latency.delay(1000)
        distance_km, duration_min = self._measure(origin, destination)

        points = synthesize_path(
            origin.as_tuple(),
            destination.as_tuple(),
            self._rng,
            jitter_degrees=self.path_jitter_degrees,
            precision=self.path_precision,
        )
        minutes = round_minutes(duration_min)
        route = RouteEstimate(
            path_encoding=encode_path(points, self.path_precision),
            eta_minutes=minutes,
            distance_km=round_half_up(distance_km, 1),
            duration_minutes=minutes,
        )
        logger.debug(
            f"Computed route: {route.distance_km} km, {route.duration_minutes} min"
        )
        return route

    async def get_eta(self, origin: Location, destination: Location) -> int:
        """Travel time in whole minutes, without synthesizing a path."""
        await self.latency.delay(300)
        _, duration_min = self._measure(origin, destination)
        return round_minutes(duration_min)

    def decode_path(self, path_encoding: str) -> list[Coordinate]:
        return [
            Coordinate(lat=lat, lng=lng)
            for lat, lng in decode_path(path_encoding, self.path_precision)
        ]

    def _measure(self, origin: Location, destination: Location) -> tuple[float, float]:
        validate_coordinate(origin.lat, origin.lng)
        validate_coordinate(destination.lat, destination.lng)
        distance_km = haversine_distance_km(origin.lat, origin.lng, destination.lat, destination.lng)
        duration_min = distance_km / self.average_speed_kmh * 60
        return distance_km, duration_min
