"""Simulated network latency for the stand-in backend calls."""

import asyncio


class LatencySimulator:
    """Suspends the calling task for a scaled, bounded delay.

    A multiplier of 0 turns every delay into a no-op so tests run instantly.
    """

    def __init__(self, multiplier: float = 1.0):
        if multiplier < 0:
            raise ValueError("Latency multiplier must be non-negative")
        self.multiplier = multiplier

    async def delay(self, milliseconds: float) -> None:
        seconds = milliseconds * self.multiplier / 1000.0
        if seconds <= 0:
            return
        await asyncio.sleep(seconds)
