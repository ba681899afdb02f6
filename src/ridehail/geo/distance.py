"""Great-circle distance calculations.

Haversine distances between coordinates, used for route estimates and
proximity checks on simulated drivers.
"""

from math import atan2, cos, radians, sin, sqrt

from ridehail.core.exceptions import InvalidInputError

EARTH_RADIUS_KM = 6371.0


def validate_coordinate(lat: float, lng: float) -> None:
    """Reject latitude/longitude values outside the valid degree ranges."""
    if not -90.0 <= lat <= 90.0:
        raise InvalidInputError(
            f"Latitude {lat} is outside [-90, 90]", details={"lat": lat, "lng": lng}
        )
    if not -180.0 <= lng <= 180.0:
        raise InvalidInputError(
            f"Longitude {lng} is outside [-180, 180]", details={"lat": lat, "lng": lng}
        )


def haversine_distance_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
) -> float:
    """Calculate the great-circle distance between two points in kilometers.

    Uses the Haversine formula to calculate the shortest distance over
    the Earth's surface between two points specified by latitude/longitude.

    Args:
        lat1: Latitude of first point in degrees
        lng1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lng2: Longitude of second point in degrees

    Returns:
        Distance between the two points in kilometers
    """
    lat1, lng1, lat2, lng2 = map(radians, [lat1, lng1, lat2, lng2])
    dlat = lat2 - lat1
    dlng = lng2 - lng1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    # Rounding can push antipodal pairs just past 1.0.
    a = min(1.0, a)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def clamp_coordinate(lat: float, lng: float) -> tuple[float, float]:
    """Clamp a jittered position back into the valid degree ranges."""
    return max(-90.0, min(90.0, lat)), max(-180.0, min(180.0, lng))
