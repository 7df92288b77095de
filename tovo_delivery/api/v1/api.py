"""API v1 router composition."""

from fastapi import APIRouter

from tovo_delivery.api.v1.endpoints import delivery

api_router: APIRouter = APIRouter()
api_router.include_router(delivery.customer_router, prefix="/customers/delivery", tags=["customer-delivery"])
api_router.include_router(delivery.ordering_router, prefix="/ordering/delivery", tags=["ordering-delivery"])
