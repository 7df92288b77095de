"""Schema exports."""

from tovo_delivery.schemas.delivery import (
    Coordinate,
    DeliveryEnvelope,
    EtaRange,
    ExpectedArrivalResponse,
    FeeCalculationRequest,
    FeeResult,
    TimingFactors,
    TimingResult,
)

__all__ = [
    "Coordinate",
    "DeliveryEnvelope",
    "EtaRange",
    "ExpectedArrivalResponse",
    "FeeCalculationRequest",
    "FeeResult",
    "TimingFactors",
    "TimingResult",
]
