"""Location resolution behind a stubbed geocoding collaborator."""

import logging
import random
from typing import Protocol

from ridehail.core.exceptions import NotFoundError, UpstreamUnavailableError
from ridehail.core.latency import LatencySimulator
from ridehail.core.retry import RetryConfig, with_retry
from ridehail.geo.distance import clamp_coordinate
from ridehail.models import Location

logger = logging.getLogger(__name__)

SAMPLE_LOCATIONS: tuple[Location, ...] = (
    Location(lat=40.7128, lng=-74.0060, address="123 Broadway, New York, NY", name="Home"),
    Location(lat=40.7580, lng=-73.9855, address="30 Rockefeller Plaza, New York, NY", name="Work"),
    Location(
        lat=40.7484,
        lng=-73.9857,
        address="350 5th Ave, New York, NY",
        name="Empire State Building",
    ),
    Location(
        lat=40.7527,
        lng=-73.9772,
        address="109 E 42nd St, New York, NY",
        name="Grand Central Terminal",
    ),
    Location(lat=40.7516, lng=-73.9776, address="200 Park Ave, New York, NY", name="MetLife Building"),
)

CURRENT_LOCATION = Location(
    lat=40.7128, lng=-74.0060, address="Current Location", name="Current Location"
)

RECENT_LOCATION_COUNT = 3
ADDRESS_JITTER_DEGREES = 0.005


class Geocoder(Protocol):
    """Resolves free-text addresses to locations."""

    async def geocode(self, address: str) -> Location: ...


class SampleGeocoder:
    """Geocoder that answers from a fixed sample set.

    Fails only with NotFoundError, when it has no samples to answer from.
    """

    def __init__(
        self,
        rng: random.Random,
        samples: tuple[Location, ...] = SAMPLE_LOCATIONS,
        jitter_degrees: float = ADDRESS_JITTER_DEGREES,
    ):
        self._rng = rng
        self.samples = samples
        self.jitter_degrees = jitter_degrees

    async def geocode(self, address: str) -> Location:
        if not self.samples:
            raise NotFoundError(
                f"No location found for address {address!r}", details={"address": address}
            )
        sample = self._rng.choice(self.samples)
        lat, lng = clamp_coordinate(
            sample.lat + self._rng.uniform(-self.jitter_degrees, self.jitter_degrees),
            sample.lng + self._rng.uniform(-self.jitter_degrees, self.jitter_degrees),
        )
        return Location(lat=lat, lng=lng, address=address or sample.address)


class LocationService:
    """Resolves addresses and offers location suggestions.

    This is the boundary to the geocoding backend: upstream outages are
    retried here with exponential backoff and nowhere else.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        latency: LatencySimulator,
        retry_config: RetryConfig | None = None,
        samples: tuple[Location, ...] = SAMPLE_LOCATIONS,
    ):
        self.geocoder = geocoder
        self.latency = latency
        self.retry_config = retry_config or RetryConfig(
            retryable_exceptions=(UpstreamUnavailableError,)
        )
        self.samples = samples

    async def resolve_address(self, address: str) -> Location:
        await self.latency.delay(700)
        location = await with_retry(
            lambda: self.geocoder.geocode(address),
            config=self.retry_config,
            operation_name="geocode",
        )
        logger.debug(f"Resolved address {address!r} to ({location.lat}, {location.lng})")
        return location

    async def current_location(self) -> Location:
        await self.latency.delay(500)
        return CURRENT_LOCATION

    async def suggestions(self, text: str) -> list[Location]:
        await self.latency.delay(300)
        needle = text.lower()
        return [
            location
            for location in self.samples
            if needle in (location.address or "").lower()
            or needle in (location.name or "").lower()
        ]

    async def recent_locations(self) -> list[Location]:
        await self.latency.delay(200)
        return list(self.samples[:RECENT_LOCATION_COUNT])
