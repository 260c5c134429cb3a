from sqlalchemy.ext.asyncio import AsyncSession
from models import Task
from repositories.base import BaseRepository

class TaskRepository(BaseRepository[Task]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Task)
