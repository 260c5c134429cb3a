from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

"""
Controller for Analytics.
Serves the dashboard summary: patient and appointment totals, revenue,
month-over-month patient growth and the trailing 30-day appointment trend.
"""

from database import get_db
from repositories.analytics import AnalyticsRepository
from services.analytics import AnalyticsService
from api.analytics_schema import AnalyticsSummary

router = APIRouter(prefix="/analytics", tags=["Analytics"])

# Provide repository instance per request.
def get_analytics_repository(session: AsyncSession = Depends(get_db)) -> AnalyticsRepository:
    return AnalyticsRepository(session)

# Provide service instance per request.
def get_analytics_service(repository: AnalyticsRepository = Depends(get_analytics_repository)) -> AnalyticsService:
    """Dependency injection for AnalyticsService"""
    return AnalyticsService(repository)

# Return the aggregated analytics summary for the dashboard.
@router.get("/summary", response_model=AnalyticsSummary)
async def get_analytics_summary(
    reference_date: date = None,
    service: AnalyticsService = Depends(get_analytics_service)
):
    return await service.get_summary(now=reference_date)
