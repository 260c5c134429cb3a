from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from models import Patient, Appointment, Consultation

class AnalyticsRepository:
    """Read-only access to the collections the analytics summary is built from."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fetch(self, model) -> list:
        result = await self.session.execute(select(model).order_by(model.id))
        return list(result.scalars().all())

    async def get_patients(self) -> list[Patient]:
        return await self._fetch(Patient)

    async def get_appointments(self) -> list[Appointment]:
        return await self._fetch(Appointment)

    async def get_consultations(self) -> list[Consultation]:
        return await self._fetch(Consultation)
