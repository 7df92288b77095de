"""Delivery fee, availability and ETA estimation.

Shared by the customer and online-ordering routers. Every call is computed
from its arguments alone: the config snapshot, the destination and, for
timing, the supplied clock.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from tovo_delivery.core.config import DeliveryConfig
from tovo_delivery.schemas.delivery import Coordinate, EtaRange, FeeResult, TimingFactors, TimingResult
from tovo_delivery.services.geo import great_circle_distance_km
from tovo_delivery.services.rush_hour import rush_hour_multiplier

logger = logging.getLogger(__name__)

OUTSIDE_RADIUS_REASON: str = "Outside delivery radius"
MIN_ETA_RANGE_MINUTES: int = 15
ETA_RANGE_BELOW_MINUTES: int = 10
ETA_RANGE_ABOVE_MINUTES: int = 15
ARRIVAL_BUFFER_MINUTES: int = 15


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 upwards like JavaScript's Math.round; the built-in round() rounds half to even."""
    scale: int = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def _distance_within_radius(
    destination: Coordinate,
    config: DeliveryConfig,
    origin: Coordinate | None,
) -> tuple[float, bool]:
    distance: float = great_circle_distance_km(origin or config.origin, destination)
    if distance > config.radius_km:
        logger.info(
            "[DELIVERY] Destination %.2f km away is outside the %s km radius",
            distance,
            config.radius_km,
        )
        return distance, False
    return distance, True


def estimate_fee(
    destination: Coordinate,
    order_amount: float = 0,
    *,
    config: DeliveryConfig,
    origin: Coordinate | None = None,
) -> FeeResult:
    """Decide availability and price delivery to destination.

    The fee is waived once order_amount reaches the free-delivery threshold.
    The ETA here ignores rush hour; estimate_timing applies it.
    """
    distance, available = _distance_within_radius(destination, config, origin)
    if not available:
        return FeeResult(available=False, reason=OUTSIDE_RADIUS_REASON)

    qualifies_for_free: bool = order_amount >= config.free_threshold
    fee: float = 0 if qualifies_for_free else config.base_fee + distance * config.per_km_fee
    eta_minutes: float = config.base_eta_minutes + distance * config.distance_eta_factor

    result = FeeResult(
        available=True,
        distance_km=round_half_up(distance, 2),
        fee=fee,
        eta_minutes=eta_minutes,
        free_threshold=config.free_threshold,
        qualifies_for_free=qualifies_for_free,
    )
    logger.debug("[DELIVERY] Fee estimate: %s", result)
    return result


def estimate_timing(
    destination: Coordinate,
    *,
    config: DeliveryConfig,
    now: datetime | None = None,
    origin: Coordinate | None = None,
) -> TimingResult:
    """Estimate delivery time for destination, inflated during rush hour."""
    distance, available = _distance_within_radius(destination, config, origin)
    if not available:
        return TimingResult(available=False, reason=OUTSIDE_RADIUS_REASON)

    current: datetime = now or datetime.now()
    base_estimate: float = config.base_eta_minutes + distance * config.distance_eta_factor
    multiplier: float = rush_hour_multiplier(current.hour)
    final_estimate: int = int(round_half_up(base_estimate * multiplier))
    rush_hour: bool = multiplier > 1.0

    result = TimingResult(
        available=True,
        distance_km=round_half_up(distance, 2),
        eta_minutes=final_estimate,
        eta_range=EtaRange(
            min=max(MIN_ETA_RANGE_MINUTES, final_estimate - ETA_RANGE_BELOW_MINUTES),
            max=final_estimate + ETA_RANGE_ABOVE_MINUTES,
        ),
        is_rush_hour=rush_hour,
        factors=TimingFactors(distance=distance, rush_hour=rush_hour),
    )
    logger.debug("[DELIVERY] Timing estimate at hour %s: %s", current.hour, result)
    return result


def estimated_delivery_at(requested_at: datetime, config: DeliveryConfig) -> datetime:
    """Return expected arrival for a delivery requested at requested_at."""
    return requested_at + timedelta(minutes=config.base_eta_minutes + ARRIVAL_BUFFER_MINUTES)
