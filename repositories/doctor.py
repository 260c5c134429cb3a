from sqlalchemy.ext.asyncio import AsyncSession
from models import Doctor
from repositories.base import BaseRepository

class DoctorRepository(BaseRepository[Doctor]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Doctor)
