"""FastAPI entrypoint for the delivery estimation service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tovo_delivery.api.v1.api import api_router
from tovo_delivery.core.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup() -> None:
    delivery = settings.delivery
    logger.info(
        "[CONFIG] Delivery origin=(%s, %s) radius=%s km base_fee=%s per_km_fee=%s free_threshold=%s base_eta=%s min",
        delivery.origin.latitude,
        delivery.origin.longitude,
        delivery.radius_km,
        delivery.base_fee,
        delivery.per_km_fee,
        delivery.free_threshold,
        delivery.base_eta_minutes,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("[VALIDATION] Rejected %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.get("/health")
def health() -> dict[str, str | bool]:
    return {"success": True, "service": "delivery-service", "status": "healthy", "environment": settings.app_env}
