from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from models import Consultation
from repositories.base import BaseRepository

class ConsultationRepository(BaseRepository[Consultation]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Consultation)

    async def get_all_with_parties(self) -> list[Consultation]:
        """Get all consultations with patient and doctor loaded, in insertion order"""
        query = (
            select(self.model)
            .options(
                selectinload(self.model.patient),
                selectinload(self.model.doctor)
            )
            .order_by(self.model.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_id_with_parties(self, consultation_id: int) -> Optional[Consultation]:
        query = (
            select(self.model)
            .options(
                selectinload(self.model.patient),
                selectinload(self.model.doctor)
            )
            .where(self.model.id == consultation_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
