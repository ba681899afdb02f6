"""Time-of-day surge multipliers."""

from datetime import datetime

RUSH_HOUR_MULTIPLIER = 1.5
DAYTIME_MULTIPLIER = 1.2
EVENING_MULTIPLIER = 1.3
BASE_MULTIPLIER = 1.0


def surge_multiplier_for_hour(hour: int) -> float:
    """Surge multiplier for a local clock hour (0-23).

    Rush hours 7-9 and 17-19 are inclusive at both ends and take precedence
    over the daytime (10-16) and evening (20-22) bands.
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour must be in 0-23, got {hour}")

    if 7 <= hour <= 9 or 17 <= hour <= 19:
        return RUSH_HOUR_MULTIPLIER
    if 9 < hour < 17:
        return DAYTIME_MULTIPLIER
    if 19 < hour < 23:
        return EVENING_MULTIPLIER
    return BASE_MULTIPLIER


def surge_multiplier_at(moment: datetime) -> float:
    return surge_multiplier_for_hour(moment.hour)
