"""Custom Faker providers for simulated ride-hailing drivers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from faker import Faker
from faker.providers import BaseProvider

from ridehail.models import RideClass

if TYPE_CHECKING:
    from faker.proxy import Faker as FakerType


class RideVehicleProvider(BaseProvider):
    """Vehicles by ride class: sedans, SUVs and economy cars."""

    VEHICLES: dict[RideClass, list[str]] = {
        RideClass.STANDARD: [
            "Toyota Camry",
            "Honda Accord",
            "Nissan Altima",
            "Ford Fusion",
            "Hyundai Sonata",
        ],
        RideClass.BLESSED_XL: [
            "Toyota Highlander",
            "Honda Pilot",
            "Ford Explorer",
            "Chevrolet Tahoe",
            "GMC Yukon",
        ],
        RideClass.LOCAL_LO: [
            "Toyota Corolla",
            "Honda Civic",
            "Nissan Sentra",
            "Ford Focus",
            "Hyundai Elantra",
        ],
    }

    def vehicle_for_class(self, ride_class: RideClass) -> str:
        """Pick a vehicle from the ride class's vocabulary."""
        return self.random_element(self.VEHICLES[ride_class])


class DriverNameProvider(BaseProvider):
    def driver_name(self) -> str:
        """Generate a display name: first and last name."""
        return f"{self.generator.first_name()} {self.generator.last_name()}"


def create_faker_instance(seed: int | None = None, locale: str = "en_US") -> FakerType:
    """Create a configured Faker instance with the driver providers.

    Args:
        seed: Optional seed for reproducible random data.
        locale: Faker locale used for driver names.

    Returns:
        Configured Faker instance with all custom providers.
    """
    fake: FakerType = Faker(locale)

    if seed is not None:
        fake.seed_instance(seed)

    fake.add_provider(RideVehicleProvider)
    fake.add_provider(DriverNameProvider)

    return fake
