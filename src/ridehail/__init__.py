"""Domain services for simulated ride-hailing requests."""

__version__ = "0.1.0"
