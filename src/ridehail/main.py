"""Demo entry point: books one sample ride end to end."""

import asyncio
import logging

from ridehail.container import RideServices, build_services
from ridehail.geo.locations import SAMPLE_LOCATIONS
from ridehail.ride import RideRequest, RideStatus
from ridehail.ride_logging import setup_logging_from_settings
from ridehail.settings import get_settings

logger = logging.getLogger(__name__)

DEMO_NOTES = "I have luggage and a car seat, please call when you arrive"


async def book_sample_ride(services: RideServices) -> None:
    pickup, dropoff = SAMPLE_LOCATIONS[0], SAMPLE_LOCATIONS[1]

    validation = await services.notes.validate(DEMO_NOTES)
    if not validation.valid:
        logger.warning(f"Notes rejected: {validation.reason}")
        return
    analysis = await services.notes.analyze(DEMO_NOTES)
    logger.info(
        f"Notes: accessibility={analysis.accessibility_needed}, "
        f"special_needs={sorted(analysis.special_needs)}"
    )

    route = await services.routes.compute_route(pickup, dropoff)
    fares = await services.fares.compare_fares(pickup, dropoff)
    for ride_class, fare in fares.items():
        logger.info(f"{ride_class.value}: {fare.total:.2f} {fare.currency}")

    request = RideRequest(
        pickup=pickup,
        dropoff=dropoff,
        notes=DEMO_NOTES,
        route=route,
        fare=await services.fares.estimate_fare(pickup, dropoff, route=route),
    )
    record = await services.rides.request_ride(request)
    record = services.rides.transition(record, RideStatus.IN_PROGRESS)
    record = services.rides.transition(record, RideStatus.COMPLETED)
    logger.info(f"Ride {record.ride_id} finished with status {record.status.value}")


def main() -> None:
    """Main entry point - wires the services and runs the demo booking."""
    settings = get_settings()
    setup_logging_from_settings(settings.logging)

    services = build_services(settings)
    asyncio.run(book_sample_ride(services))


if __name__ == "__main__":
    main()
