"""Shared data model for locations, drivers, routes, fares and notes."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

FARE_TOLERANCE = 0.01


class RideClass(str, Enum):
    """Service tier, determining pricing and vehicle category."""

    STANDARD = "Standard"
    BLESSED_XL = "Blessed XL"
    LOCAL_LO = "Local Lo"


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


class Location(Coordinate):
    """A resolved place: coordinates plus optional display text."""

    address: str | None = None
    name: str | None = None


class Driver(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    position: Coordinate
    ride_class: RideClass
    name: str
    rating: float = Field(ge=3.5, le=5.0)
    vehicle_description: str
    eta_minutes: int = Field(ge=1)


class RouteEstimate(BaseModel):
    """Straight-line route estimate between two locations.

    ``eta_minutes`` always equals ``duration_minutes``; both are rounded from
    the same unrounded travel time.
    """

    model_config = ConfigDict(frozen=True)

    path_encoding: str
    eta_minutes: int = Field(ge=0)
    distance_km: float = Field(ge=0)
    duration_minutes: int = Field(ge=0)


class FareBreakdown(BaseModel):
    """Priced fare with its four additive components."""

    model_config = ConfigDict(frozen=True)

    total: float = Field(ge=0)
    base: float = Field(ge=0)
    distance_component: float = Field(ge=0)
    time_component: float = Field(ge=0)
    surge_component: float = Field(ge=0)
    currency: str
    ride_class: RideClass
    surge_multiplier: float = Field(ge=1.0)

    @model_validator(mode="after")
    def validate_total_matches_components(self) -> "FareBreakdown":
        components = (
            self.base + self.distance_component + self.time_component + self.surge_component
        )
        if abs(self.total - components) > FARE_TOLERANCE + 1e-9:
            raise ValueError(
                f"Fare total {self.total} does not match component sum {components:.2f}"
            )
        return self


class NotesAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    dispatch_flags: frozenset[str] = frozenset()
    accessibility_needed: bool = False
    special_needs: frozenset[str] = frozenset()


class NotesValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: str | None = None


class CancellationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ride_id: str
    success: bool
