"""Delivery estimation API schemas."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class Coordinate(BaseModel):
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    model_config = ConfigDict(frozen=True)


class FeeResult(BaseModel):
    """Delivery availability and fee for a destination."""

    available: bool
    reason: str | None = None
    distance_km: float | None = None
    fee: float | None = None
    eta_minutes: float | None = None
    free_threshold: int | None = None
    qualifies_for_free: bool | None = None

    model_config = ConfigDict(frozen=True)


class EtaRange(BaseModel):
    """Lower and upper bound of a delivery estimate, in minutes."""

    min: int
    max: int

    model_config = ConfigDict(frozen=True)


class TimingFactors(BaseModel):
    """Inputs that shaped a timing estimate."""

    distance: float
    rush_hour: bool
    weather: str = "normal"

    model_config = ConfigDict(frozen=True)


class TimingResult(BaseModel):
    """Rush-hour adjusted delivery estimate for a destination."""

    available: bool
    reason: str | None = None
    distance_km: float | None = None
    eta_minutes: int | None = None
    eta_range: EtaRange | None = None
    is_rush_hour: bool | None = None
    factors: TimingFactors | None = None

    model_config = ConfigDict(frozen=True)


class FeeCalculationRequest(BaseModel):
    """Payload for fee calculation; accepts the legacy Spanish keys as well."""

    latitude: float = Field(ge=-90, le=90, validation_alias=AliasChoices("latitude", "latitud"))
    longitude: float = Field(ge=-180, le=180, validation_alias=AliasChoices("longitude", "longitud"))
    order_amount: float = Field(default=0, ge=0, validation_alias=AliasChoices("order_amount", "monto_orden"))


class ExpectedArrivalResponse(BaseModel):
    """Expected arrival for a delivery requested at a given time."""

    requested_at: datetime
    estimated_delivery_at: datetime


class DeliveryEnvelope(BaseModel, Generic[DataT]):
    """Standard success/data/message wrapper shared by delivery endpoints."""

    success: bool
    data: DataT
    message: str
