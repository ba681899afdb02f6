"""Route path synthesis and encoding.

Paths are encoded with the Google polyline algorithm. Points are quantized to
the encoding precision before encoding, so decoding an encoded path returns
exactly the points that were encoded.
"""

import random

import polyline

from ridehail.geo.distance import clamp_coordinate

DEFAULT_PRECISION = 6

# Fractions of the origin-destination segment where midpoints are placed.
MIDPOINT_FRACTIONS = (0.33, 0.66)


def quantize_point(point: tuple[float, float], precision: int = DEFAULT_PRECISION) -> tuple[float, float]:
    return (round(point[0], precision), round(point[1], precision))


def encode_path(points: list[tuple[float, float]], precision: int = DEFAULT_PRECISION) -> str:
    """Encode (lat, lng) points as a polyline string."""
    return polyline.encode([quantize_point(p, precision) for p in points], precision)


def decode_path(encoded: str, precision: int = DEFAULT_PRECISION) -> list[tuple[float, float]]:
    """Decode polyline string to list of (lat, lng) tuples."""
    coords = polyline.decode(encoded, precision)
    return [(lat, lng) for lat, lng in coords]


def synthesize_path(
    origin: tuple[float, float],
    destination: tuple[float, float],
    rng: random.Random,
    jitter_degrees: float = 0.005,
    precision: int = DEFAULT_PRECISION,
) -> list[tuple[float, float]]:
    """Build origin, two jittered midpoints, destination.

    Midpoints sit at 33% and 66% of the straight line and are offset on each
    axis by at most ``jitter_degrees`` so the drawn route is not a ruler line.
    """
    lat1, lng1 = origin
    lat2, lng2 = destination

    points = [origin]
    for fraction in MIDPOINT_FRACTIONS:
        lat = lat1 + (lat2 - lat1) * fraction + rng.uniform(-jitter_degrees, jitter_degrees)
        lng = lng1 + (lng2 - lng1) * fraction + rng.uniform(-jitter_degrees, jitter_degrees)
        points.append(clamp_coordinate(lat, lng))
    points.append(destination)

    return [quantize_point(p, precision) for p in points]
