from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import ResourceNotFoundException
from repositories.doctor import DoctorRepository
from services.doctor import DoctorService
from schemas import (
    Doctor as DoctorSchema,
    DoctorCreate,
    DoctorStats,
    DoctorUpdate,
    PaginatedDoctorsResponse,
)

router = APIRouter(prefix="/doctors", tags=["Doctors"])

def get_doctor_repository(session: AsyncSession = Depends(get_db)) -> DoctorRepository:
    return DoctorRepository(session)

def get_doctor_service(repository: DoctorRepository = Depends(get_doctor_repository)) -> DoctorService:
    return DoctorService(repository)

@router.get("/", response_model=PaginatedDoctorsResponse)
async def read_doctors(
    skip: int = 0,
    limit: int = 100,
    search: str = None,
    specialization: str = None,
    status: str = None,
    sort_by: str = "name",
    sort_order: str = "asc",
    service: DoctorService = Depends(get_doctor_service)
):
    return await service.get_doctors(
        skip=skip,
        limit=limit,
        search=search,
        specialization=specialization,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order
    )

@router.get("/stats", response_model=DoctorStats)
async def read_doctor_stats(service: DoctorService = Depends(get_doctor_service)):
    """Headcount, active doctors and the specializations offered"""
    return await service.get_stats()

@router.post("/", response_model=DoctorSchema, status_code=status.HTTP_201_CREATED)
async def create_doctor(
    doctor: DoctorCreate,
    service: DoctorService = Depends(get_doctor_service)
):
    return await service.create_doctor(doctor)

@router.get("/{doctor_id}", response_model=DoctorSchema)
async def read_doctor(
    doctor_id: int,
    service: DoctorService = Depends(get_doctor_service)
):
    doctor = await service.get_doctor(doctor_id)
    if doctor is None:
        raise ResourceNotFoundException("Doctor")
    return doctor

@router.patch("/{doctor_id}", response_model=DoctorSchema)
async def update_doctor(
    doctor_id: int,
    changes: DoctorUpdate,
    service: DoctorService = Depends(get_doctor_service)
):
    doctor = await service.update_doctor(doctor_id, changes)
    if doctor is None:
        raise ResourceNotFoundException("Doctor")
    return doctor

@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_doctor(
    doctor_id: int,
    service: DoctorService = Depends(get_doctor_service)
):
    if not await service.delete_doctor(doctor_id):
        raise ResourceNotFoundException("Doctor")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
