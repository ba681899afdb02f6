from typing import Literal

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ridehail.core.exceptions import ConfigurationError


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class SimulationSettings(BaseSettings):
    latency_multiplier: float = Field(
        default=1.0,
        ge=0.0,
        le=10.0,
        description="Scale applied to simulated backend latency. 0 disables sleeping.",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the shared random generator and Faker. None means unseeded.",
    )

    model_config = SettingsConfigDict(env_prefix="SIM_")


class RouteSettings(BaseSettings):
    average_speed_kmh: float = Field(default=30.0, gt=0.0, le=200.0)
    path_jitter_degrees: float = Field(
        default=0.005,
        ge=0.0,
        le=0.01,
        description="Maximum per-axis offset applied to synthesized route midpoints",
    )
    path_precision: int = Field(
        default=6,
        ge=5,
        le=7,
        description="Decimal places kept in encoded route paths",
    )

    model_config = SettingsConfigDict(env_prefix="ROUTE_")


class FareSettings(BaseSettings):
    currency: str = "USD"

    model_config = SettingsConfigDict(env_prefix="FARE_")


class DirectorySettings(BaseSettings):
    """Simulated driver pool configuration."""

    min_drivers: int = Field(default=3, ge=0, le=50)
    max_drivers: int = Field(default=7, ge=0, le=50)
    search_radius_degrees: float = Field(
        default=0.01,
        gt=0.0,
        le=0.1,
        description="Maximum per-axis offset of a simulated driver from the search point",
    )
    movement_jitter_degrees: float = Field(
        default=0.0025,
        ge=0.0,
        le=0.01,
        description="Maximum per-axis movement of a driver per advance step",
    )
    faker_locale: str = "en_US"

    model_config = SettingsConfigDict(env_prefix="DRIVERS_")

    @model_validator(mode="after")
    def validate_pool_bounds(self) -> "DirectorySettings":
        if self.min_drivers > self.max_drivers:
            raise ValueError(
                f"min_drivers ({self.min_drivers}) must not exceed "
                f"max_drivers ({self.max_drivers})"
            )
        return self


class NotesSettings(BaseSettings):
    max_length: int = Field(default=200, ge=1, le=2000)

    model_config = SettingsConfigDict(env_prefix="NOTES_")


class GeocodingSettings(BaseSettings):
    max_attempts: int = Field(default=3, ge=1, le=10)
    retry_base_delay: float = Field(default=0.5, ge=0.0, le=5.0)
    retry_multiplier: float = Field(default=2.0, ge=1.0, le=5.0)

    model_config = SettingsConfigDict(env_prefix="GEOCODING_")


class Settings(BaseSettings):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    route: RouteSettings = Field(default_factory=RouteSettings)
    fare: FareSettings = Field(default_factory=FareSettings)
    drivers: DirectorySettings = Field(default_factory=DirectorySettings)
    notes: NotesSettings = Field(default_factory=NotesSettings)
    geocoding: GeocodingSettings = Field(default_factory=GeocodingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises ConfigurationError listing the offending fields when the
    environment holds invalid values.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(
            f"Invalid settings: {', '.join(fields)}", details={"fields": fields}
        ) from e
