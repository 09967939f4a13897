"""Aggregate all v1 sub-routers."""

from fastapi import APIRouter

from tracker.api.v1.analytics import router as analytics_router
from tracker.api.v1.health import router as health_router
from tracker.api.v1.tracking import router as tracking_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["health"])
api_v1_router.include_router(tracking_router, tags=["tracking"])
api_v1_router.include_router(analytics_router, prefix="/analytics", tags=["analytics"])
