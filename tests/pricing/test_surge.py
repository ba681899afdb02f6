from datetime import datetime

import pytest

from ridehail.pricing.surge import surge_multiplier_at, surge_multiplier_for_hour


@pytest.mark.unit
class TestSurgeBands:
    @pytest.mark.parametrize("hour", [7, 8, 9, 17, 18, 19])
    def test_rush_hours(self, hour):
        assert surge_multiplier_for_hour(hour) == 1.5

    @pytest.mark.parametrize("hour", [10, 12, 16])
    def test_daytime(self, hour):
        assert surge_multiplier_for_hour(hour) == 1.2

    @pytest.mark.parametrize("hour", [20, 21, 22])
    def test_evening(self, hour):
        assert surge_multiplier_for_hour(hour) == 1.3

    @pytest.mark.parametrize("hour", [23, 0, 3, 6])
    def test_late_night_has_no_surge(self, hour):
        assert surge_multiplier_for_hour(hour) == 1.0

    @pytest.mark.parametrize("hour", [-1, 24])
    def test_rejects_invalid_hour(self, hour):
        with pytest.raises(ValueError):
            surge_multiplier_for_hour(hour)

    def test_reads_hour_from_datetime(self):
        assert surge_multiplier_at(datetime(2024, 1, 1, 9, 59)) == 1.5
        assert surge_multiplier_at(datetime(2024, 1, 1, 10, 0)) == 1.2
