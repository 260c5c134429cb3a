from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from exceptions import ResourceNotFoundException
from repositories.consultation import ConsultationRepository
from services.consultation import ConsultationService
from schemas import (
    Consultation as ConsultationSchema,
    ConsultationCreate,
    PaginatedConsultationsResponse,
)

router = APIRouter(prefix="/consultations", tags=["Consultations"])

def get_consultation_repository(session: AsyncSession = Depends(get_db)) -> ConsultationRepository:
    return ConsultationRepository(session)

def get_consultation_service(repository: ConsultationRepository = Depends(get_consultation_repository)) -> ConsultationService:
    return ConsultationService(repository)

@router.get("/", response_model=PaginatedConsultationsResponse)
async def read_consultations(
    skip: int = 0,
    limit: int = 100,
    search: str = None,
    doctor_id: int = None,
    sort_by: str = "created_at",
    sort_order: str = "desc",
    service: ConsultationService = Depends(get_consultation_service)
):
    return await service.get_consultations(
        skip=skip,
        limit=limit,
        search=search,
        doctor_id=doctor_id,
        sort_by=sort_by,
        sort_order=sort_order
    )

@router.post("/", response_model=ConsultationSchema, status_code=status.HTTP_201_CREATED)
async def create_consultation(
    consultation: ConsultationCreate,
    service: ConsultationService = Depends(get_consultation_service)
):
    return await service.create_consultation(consultation)

@router.get("/{consultation_id}", response_model=ConsultationSchema)
async def read_consultation(
    consultation_id: int,
    service: ConsultationService = Depends(get_consultation_service)
):
    consultation = await service.get_consultation(consultation_id)
    if consultation is None:
        raise ResourceNotFoundException("Consultation")
    return consultation
