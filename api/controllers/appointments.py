from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from database import get_db
from exceptions import ResourceNotFoundException
from repositories.appointment import AppointmentRepository
from services.appointment import AppointmentService
from schemas import (
    Appointment as AppointmentSchema,
    AppointmentCreate,
    AppointmentUpdate,
    PaginatedAppointmentsResponse,
)
from api.analytics_schema import StatusCount

router = APIRouter(prefix="/appointments", tags=["Appointments"])

def get_appointment_repository(session: AsyncSession = Depends(get_db)) -> AppointmentRepository:
    return AppointmentRepository(session)

def get_appointment_service(repository: AppointmentRepository = Depends(get_appointment_repository)) -> AppointmentService:
    return AppointmentService(repository)

@router.get("/stats", response_model=List[StatusCount])
async def read_appointment_stats(
    service: AppointmentService = Depends(get_appointment_service)
):
    """Appointment counts broken down by status"""
    return await service.get_stats()

@router.get("/", response_model=PaginatedAppointmentsResponse)
async def read_appointments(
    skip: int = 0,
    limit: int = 100,
    search: str = None,
    status: str = None,
    date_filter: str = None,
    sort_by: str = "date",
    sort_order: str = "desc",
    service: AppointmentService = Depends(get_appointment_service)
):
    return await service.get_appointments(
        skip=skip,
        limit=limit,
        search=search,
        status=status,
        date_filter=date_filter,
        sort_by=sort_by,
        sort_order=sort_order
    )

@router.post("/", response_model=AppointmentSchema, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service)
):
    return await service.create_appointment(appointment)

@router.get("/{appointment_id}", response_model=AppointmentSchema)
async def read_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service)
):
    appointment = await service.get_appointment(appointment_id)
    if appointment is None:
        raise ResourceNotFoundException("Appointment")
    return appointment

@router.patch("/{appointment_id}", response_model=AppointmentSchema)
async def update_appointment(
    appointment_id: int,
    changes: AppointmentUpdate,
    service: AppointmentService = Depends(get_appointment_service)
):
    appointment = await service.update_appointment(appointment_id, changes)
    if appointment is None:
        raise ResourceNotFoundException("Appointment")
    return appointment
