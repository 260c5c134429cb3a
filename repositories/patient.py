from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from models import Patient
from repositories.base import BaseRepository

class PatientRepository(BaseRepository[Patient]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Patient)

    async def get_by_id_with_history(self, patient_id: int):
        """Get patient with appointments and consultations loaded"""
        query = (
            select(self.model)
            .options(
                selectinload(self.model.appointments),
                selectinload(self.model.consultations)
            )
            .where(self.model.id == patient_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
