# threadspire_api/routers/analytics.py

from __future__ import annotations

from fastapi import APIRouter, Depends

from threadspire_api.dependencies import get_analytics_service
from threadspire_api.schemas.analytics import UserAnalytics
from threadspire_api.services import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get(
    "/user/{user_id}",
    response_model=UserAnalytics,
    summary="User analytics",
    description="Dashboard summary for a user (placeholder values).",
)
def get_user_analytics(
    *,
    user_id: int,
    service: AnalyticsService = Depends(get_analytics_service),
) -> UserAnalytics:
    return service.get_user_analytics(user_id)
