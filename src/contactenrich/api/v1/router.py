"""Main API router aggregating all v1 endpoints."""

from fastapi import APIRouter

from contactenrich.api.v1 import enrichment

api_router = APIRouter()

# Include sub-routers
api_router.include_router(enrichment.router, prefix="/enrichment", tags=["Enrichment"])
