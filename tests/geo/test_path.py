"""Tests for route path synthesis and polyline encoding."""

import random

import pytest

from ridehail.geo.path import decode_path, encode_path, quantize_point, synthesize_path

ORIGIN = (40.7128, -74.0060)
DESTINATION = (40.7580, -73.9855)


@pytest.mark.unit
class TestSynthesizePath:
    def test_four_points_with_fixed_endpoints(self) -> None:
        points = synthesize_path(ORIGIN, DESTINATION, random.Random(1))

        assert len(points) == 4
        assert points[0] == ORIGIN
        assert points[-1] == DESTINATION

    def test_midpoints_stay_near_straight_line(self) -> None:
        jitter = 0.005
        points = synthesize_path(ORIGIN, DESTINATION, random.Random(7), jitter_degrees=jitter)

        for point, fraction in zip(points[1:3], (0.33, 0.66)):
            expected_lat = ORIGIN[0] + (DESTINATION[0] - ORIGIN[0]) * fraction
            expected_lng = ORIGIN[1] + (DESTINATION[1] - ORIGIN[1]) * fraction
            assert abs(point[0] - expected_lat) <= jitter + 1e-6
            assert abs(point[1] - expected_lng) <= jitter + 1e-6

    def test_zero_jitter_is_straight(self) -> None:
        points = synthesize_path((0.0, 0.0), (3.0, 6.0), random.Random(3), jitter_degrees=0.0)
        assert points[1] == pytest.approx((0.99, 1.98))
        assert points[2] == pytest.approx((1.98, 3.96))

    def test_same_seed_same_path(self) -> None:
        first = synthesize_path(ORIGIN, DESTINATION, random.Random(11))
        second = synthesize_path(ORIGIN, DESTINATION, random.Random(11))
        assert first == second

    def test_midpoints_near_pole_stay_valid(self) -> None:
        points = synthesize_path((89.999, 0.0), (89.999, 10.0), random.Random(5), jitter_degrees=0.01)
        assert all(-90.0 <= lat <= 90.0 for lat, _ in points)


@pytest.mark.unit
class TestPathEncoding:
    def test_decode_inverts_encode_for_generated_paths(self) -> None:
        rng = random.Random(2024)
        for _ in range(50):
            origin = (rng.uniform(-80, 80), rng.uniform(-170, 170))
            destination = (origin[0] + rng.uniform(-0.5, 0.5), origin[1] + rng.uniform(-0.5, 0.5))
            points = synthesize_path(origin, destination, rng)

            assert decode_path(encode_path(points)) == points

    def test_encoding_is_text(self) -> None:
        encoded = encode_path([ORIGIN, DESTINATION])
        assert isinstance(encoded, str)
        assert "|" not in encoded

    def test_precision_is_respected(self) -> None:
        points = [quantize_point(ORIGIN, 5), quantize_point(DESTINATION, 5)]
        assert decode_path(encode_path(points, precision=5), precision=5) == points

    def test_quantize_point(self) -> None:
        assert quantize_point((40.71283349, -74.00601151)) == (40.712833, -74.006012)
