"""Application configuration."""

from collections.abc import Mapping
from os import environ as os_environ
from os import getenv

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tovo_delivery.schemas.delivery import Coordinate

DEFAULT_ORIGIN: Coordinate = Coordinate(latitude=-33.4489, longitude=-70.6693)

# DeliveryConfig field -> environment variable
DELIVERY_ENV_VARS: dict[str, str] = {
    "radius_km": "DELIVERY_RADIUS_KM",
    "base_fee": "DELIVERY_FEE_BASE",
    "per_km_fee": "DELIVERY_FEE_PER_KM",
    "free_threshold": "DELIVERY_FREE_THRESHOLD",
    "base_eta_minutes": "DELIVERY_ESTIMATED_TIME_MINUTES",
    "per_km_eta_minutes": "DELIVERY_ETA_PER_KM_MINUTES",
    "distance_eta_factor": "DELIVERY_DISTANCE_ETA_FACTOR",
}
ORIGIN_ENV_VARS: dict[str, str] = {
    "latitude": "RESTAURANT_LATITUDE",
    "longitude": "RESTAURANT_LONGITUDE",
}


class ConfigurationError(ValueError):
    """Raised when delivery configuration values are malformed or out of range."""


class DeliveryConfig(BaseModel):
    """Immutable snapshot of the delivery pricing and timing settings."""

    origin: Coordinate = DEFAULT_ORIGIN
    radius_km: float = Field(default=10, ge=1, le=100)
    base_fee: int = Field(default=2000, ge=0)
    per_km_fee: int = Field(default=500, ge=0)
    free_threshold: int = Field(default=25000, ge=0)
    base_eta_minutes: int = Field(default=30, ge=5, le=180)
    per_km_eta_minutes: int = Field(default=2, ge=0)
    # Minutes per km used by both ETA figures; kept apart from per_km_eta_minutes.
    distance_eta_factor: float = Field(default=2.0, ge=0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    @field_validator("origin")
    @classmethod
    def _origin_in_range(cls, value: Coordinate) -> Coordinate:
        if not -90 <= value.latitude <= 90:
            raise ValueError("latitude must be between -90 and 90")
        if not -180 <= value.longitude <= 180:
            raise ValueError("longitude must be between -180 and 180")
        return value


def _env_name(loc: tuple[int | str, ...]) -> str:
    if loc and loc[0] == "origin":
        if len(loc) > 1 and loc[1] in ORIGIN_ENV_VARS:
            return ORIGIN_ENV_VARS[str(loc[1])]
        return "/".join(ORIGIN_ENV_VARS.values())
    if loc and loc[0] in DELIVERY_ENV_VARS:
        return DELIVERY_ENV_VARS[str(loc[0])]
    return ".".join(str(part) for part in loc)


def load_delivery_config(environ: Mapping[str, str] | None = None) -> DeliveryConfig:
    """Build the delivery config from environment variables.

    Unset or blank variables keep their defaults; anything else must parse and
    fall inside the allowed range or a ConfigurationError is raised.
    """
    source: Mapping[str, str] = os_environ if environ is None else environ
    raw: dict[str, object] = {}

    for field_name, env_name in DELIVERY_ENV_VARS.items():
        value: str = source.get(env_name, "").strip()
        if value:
            raw[field_name] = value

    origin: dict[str, str] = {}
    for field_name, env_name in ORIGIN_ENV_VARS.items():
        value = source.get(env_name, "").strip()
        if value:
            origin[field_name] = value
    if origin:
        raw["origin"] = {**DEFAULT_ORIGIN.model_dump(), **origin}

    try:
        return DeliveryConfig.model_validate(raw)
    except ValidationError as exc:
        problems: list[str] = [f"{_env_name(error['loc'])}: {error['msg']}" for error in exc.errors()]
        raise ConfigurationError("Invalid delivery configuration: " + "; ".join(problems)) from exc


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "tovo-delivery API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    delivery: DeliveryConfig = Field(default_factory=load_delivery_config)


settings: Settings = Settings()


def get_delivery_config() -> DeliveryConfig:
    """Return the process-wide delivery config snapshot."""
    return settings.delivery
