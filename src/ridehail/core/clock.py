"""Injectable wall-clock providers.

Surge bands and pickup estimates depend on the local time of day, so every
service that reads the clock takes a ``Clock`` instead of calling
``datetime.now`` directly.
"""

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns ``moment``."""

    def _now() -> datetime:
        return moment

    return _now
