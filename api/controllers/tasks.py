from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import ResourceNotFoundException
from repositories.task import TaskRepository
from services.task import TaskService
from schemas import (
    Task as TaskSchema,
    TaskCreate,
    TaskStats,
    TaskUpdate,
    PaginatedTasksResponse,
)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

def get_task_repository(session: AsyncSession = Depends(get_db)) -> TaskRepository:
    return TaskRepository(session)

def get_task_service(repository: TaskRepository = Depends(get_task_repository)) -> TaskService:
    return TaskService(repository)

@router.get("/", response_model=PaginatedTasksResponse)
async def read_tasks(
    skip: int = 0,
    limit: int = 100,
    search: str = None,
    status: str = "all",
    sort_by: str = "due_date",
    sort_order: str = "asc",
    service: TaskService = Depends(get_task_service)
):
    return await service.get_tasks(
        skip=skip,
        limit=limit,
        search=search,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order
    )

@router.get("/stats", response_model=TaskStats)
async def read_task_stats(service: TaskService = Depends(get_task_service)):
    return await service.get_stats()

@router.post("/", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: TaskCreate,
    service: TaskService = Depends(get_task_service)
):
    return await service.create_task(task)

@router.patch("/{task_id}", response_model=TaskSchema)
async def update_task(
    task_id: int,
    changes: TaskUpdate,
    service: TaskService = Depends(get_task_service)
):
    task = await service.update_task(task_id, changes)
    if task is None:
        raise ResourceNotFoundException("Task")
    return task

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service)
):
    if not await service.delete_task(task_id):
        raise ResourceNotFoundException("Task")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
