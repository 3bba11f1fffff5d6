from fastapi import APIRouter

from app.api.endpoints import addresses
from app.api.endpoints import customers

api_router = APIRouter()

api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(addresses.router, tags=["addresses"])
