"""Delivery fee and estimate endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from tovo_delivery.core.config import DeliveryConfig, get_delivery_config
from tovo_delivery.schemas.delivery import (
    Coordinate,
    DeliveryEnvelope,
    ExpectedArrivalResponse,
    FeeCalculationRequest,
    FeeResult,
    TimingResult,
)
from tovo_delivery.services.delivery_estimator import estimate_fee, estimate_timing, estimated_delivery_at

UNAVAILABLE_MESSAGE: str = "Delivery not available at this location"

customer_router: APIRouter = APIRouter()
ordering_router: APIRouter = APIRouter()


def _current_local_datetime() -> datetime:
    return datetime.now()


@customer_router.post(
    "/calculate-fee",
    response_model=DeliveryEnvelope[FeeResult],
    response_model_exclude_none=True,
)
@ordering_router.post(
    "/calculate-fee",
    response_model=DeliveryEnvelope[FeeResult],
    response_model_exclude_none=True,
)
def calculate_delivery_fee(
    payload: FeeCalculationRequest,
    config: DeliveryConfig = Depends(get_delivery_config),
) -> DeliveryEnvelope[FeeResult]:
    """Calculate delivery fee for a destination and order amount."""
    result: FeeResult = estimate_fee(
        Coordinate(latitude=payload.latitude, longitude=payload.longitude),
        payload.order_amount,
        config=config,
    )
    if not result.available:
        return DeliveryEnvelope[FeeResult](success=False, data=result, message=UNAVAILABLE_MESSAGE)
    return DeliveryEnvelope[FeeResult](success=True, data=result, message="Delivery fee calculated successfully")


@ordering_router.get(
    "/estimates",
    response_model=DeliveryEnvelope[TimingResult],
    response_model_exclude_none=True,
)
def get_delivery_estimates(
    latitude: float = Query(ge=-90, le=90),
    longitude: float = Query(ge=-180, le=180),
    config: DeliveryConfig = Depends(get_delivery_config),
) -> DeliveryEnvelope[TimingResult]:
    """Estimate delivery time for a destination at the current local time."""
    result: TimingResult = estimate_timing(
        Coordinate(latitude=latitude, longitude=longitude),
        config=config,
        now=_current_local_datetime(),
    )
    if not result.available:
        return DeliveryEnvelope[TimingResult](success=False, data=result, message=UNAVAILABLE_MESSAGE)
    return DeliveryEnvelope[TimingResult](
        success=True,
        data=result,
        message="Delivery estimates retrieved successfully",
    )


@ordering_router.get("/expected-arrival", response_model=DeliveryEnvelope[ExpectedArrivalResponse])
def get_expected_arrival(
    requested_at: datetime,
    config: DeliveryConfig = Depends(get_delivery_config),
) -> DeliveryEnvelope[ExpectedArrivalResponse]:
    """Return when a delivery requested at requested_at should arrive."""
    return DeliveryEnvelope[ExpectedArrivalResponse](
        success=True,
        data=ExpectedArrivalResponse(
            requested_at=requested_at,
            estimated_delivery_at=estimated_delivery_at(requested_at, config),
        ),
        message="Expected arrival calculated successfully",
    )
