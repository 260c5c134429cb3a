from datetime import date, datetime, timedelta
from typing import Any, Callable, Iterable, Optional

from config import CONSULTATION_RATE
from repositories.analytics import AnalyticsRepository
from api.analytics_schema import AnalyticsSummary, TrendPoint

TREND_DAYS = 30


def _as_day(value: Any) -> Optional[date]:
    """Calendar day of a date, datetime or ISO string; None when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def compute_analytics(
    patients: Optional[Iterable[Any]],
    appointments: Optional[Iterable[Any]],
    consultations: Optional[Iterable[Any]],
    now: date,
    unit_rate: float = CONSULTATION_RATE,
) -> AnalyticsSummary:
    """Summarise clinic activity as of `now`.

    Pure and total: missing collections count as empty and malformed dates
    never match a day or month. `now` may be a date or a datetime; only its
    calendar day is used.
    """
    patients = list(patients or [])
    appointments = list(appointments or [])
    consultations = list(consultations or [])

    today = _as_day(now)
    current_month = (today.year, today.month)
    last_month = _previous_month(today.year, today.month)

    completed = [a for a in appointments if getattr(a, "status", None) == "completed"]
    # Cancelled and rescheduled appointments are in neither count.
    pending = [a for a in appointments if getattr(a, "status", None) == "scheduled"]

    monthly_completed = 0
    for apt in completed:
        day = _as_day(getattr(apt, "date", None))
        if day and (day.year, day.month) == current_month:
            monthly_completed += 1

    current_month_patients = 0
    last_month_patients = 0
    for patient in patients:
        created = _as_day(getattr(patient, "created_at", None))
        if created is None:
            continue
        if (created.year, created.month) == current_month:
            current_month_patients += 1
        elif (created.year, created.month) == last_month:
            last_month_patients += 1

    if last_month_patients > 0:
        patient_growth = (current_month_patients - last_month_patients) / last_month_patients * 100
    else:
        patient_growth = 0.0

    # Exact string match on the stored day, as written by the booking form.
    per_day = {}
    for apt in appointments:
        key = getattr(apt, "date", None)
        if isinstance(key, str):
            per_day[key] = per_day.get(key, 0) + 1

    trends = []
    for offset in range(TREND_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        trends.append(TrendPoint(date=day, count=per_day.get(day.isoformat(), 0)))

    return AnalyticsSummary(
        total_patients=len(patients),
        total_appointments=len(appointments),
        completed_appointments=len(completed),
        pending_appointments=len(pending),
        total_revenue=len(consultations) * unit_rate,
        monthly_revenue=monthly_completed * unit_rate,
        patient_growth=patient_growth,
        appointment_trends=trends,
    )


class AnalyticsService:
    def __init__(
        self,
        repository: AnalyticsRepository,
        clock: Callable[[], datetime] = datetime.now,
        unit_rate: float = CONSULTATION_RATE,
    ):
        self.repository = repository
        self.clock = clock
        self.unit_rate = unit_rate

    async def get_summary(self, now: Optional[date] = None) -> AnalyticsSummary:
        patients = await self.repository.get_patients()
        appointments = await self.repository.get_appointments()
        consultations = await self.repository.get_consultations()

        return compute_analytics(
            patients,
            appointments,
            consultations,
            now or self.clock(),
            unit_rate=self.unit_rate,
        )
