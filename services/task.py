from datetime import datetime
from typing import Callable, Optional
from loggers import app_logger
from models import Task
from repositories.task import TaskRepository
from schemas import TaskCreate, TaskUpdate
from services.listing import filter_records, sort_records, paginate

SEARCH_FIELDS = ("title", "description")


def parse_due(value: str) -> Optional[datetime]:
    """Due dates arrive as ISO dates or datetimes; None when unparseable."""
    try:
        due = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None
    # Compare against the naive local clock.
    return due.replace(tzinfo=None)


SORT_KEYS = {
    "title": lambda t: t.title.lower(),
    "due_date": lambda t: parse_due(t.due_date),
    "created_at": lambda t: t.created_at,
}

STATUS_FILTERS = {
    "completed": lambda t: t.completed,
    "pending": lambda t: not t.completed,
}

class TaskService:
    def __init__(self, repository: TaskRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    def is_overdue(self, task: Task) -> bool:
        due = parse_due(task.due_date)
        return not task.completed and due is not None and due < self.clock()

    async def get_tasks(
        self,
        skip: int = 0,
        limit: int = 100,
        search: str = None,
        status: str = "all",  # "all", "completed", "pending"
        sort_by: str = "due_date",
        sort_order: str = "asc"
    ) -> dict:
        tasks = await self.repository.get_all()
        filtered = filter_records(tasks, search, SEARCH_FIELDS, STATUS_FILTERS.get(status))
        ordered = sort_records(filtered, SORT_KEYS.get(sort_by, SORT_KEYS["due_date"]), sort_order)
        return paginate(ordered, skip, limit)

    async def get_stats(self) -> dict:
        tasks = await self.repository.get_all()
        completed = sum(1 for t in tasks if t.completed)
        return {
            "total": len(tasks),
            "completed": completed,
            "pending": len(tasks) - completed,
            "overdue": sum(1 for t in tasks if self.is_overdue(t)),
        }

    async def create_task(self, data: TaskCreate) -> Task:
        task = Task(**data.model_dump(), completed=False, created_at=self.clock())
        task = await self.repository.add(task)
        app_logger.info(f"Created task {task.id}: {task.title!r}")
        return task

    async def update_task(self, task_id: int, data: TaskUpdate) -> Optional[Task]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        task = await self.repository.update(task_id, changes)
        if task is not None:
            app_logger.info(f"Updated task {task_id}: {sorted(changes)}")
        return task

    async def delete_task(self, task_id: int) -> bool:
        deleted = await self.repository.delete(task_id)
        if deleted:
            app_logger.info(f"Deleted task {task_id}")
        return deleted
