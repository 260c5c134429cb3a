from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from database import get_db
from exceptions import ResourceNotFoundException
from repositories.patient import PatientRepository
from services.patient import PatientService
from schemas import (
    Patient as PatientSchema,
    PatientCreate,
    PatientDetails,
    PatientUpdate,
    PaginatedPatientsResponse,
)

router = APIRouter(prefix="/patients", tags=["Patients"])

def get_patient_repository(session: AsyncSession = Depends(get_db)) -> PatientRepository:
    return PatientRepository(session)

def get_patient_service(repository: PatientRepository = Depends(get_patient_repository)) -> PatientService:
    return PatientService(repository)

@router.get("/", response_model=PaginatedPatientsResponse)
async def read_patients(
    skip: int = 0,
    limit: int = 100,
    search: str = None,
    gender: str = None,
    sort_by: str = "name",
    sort_order: str = "asc",
    service: PatientService = Depends(get_patient_service)
):
    return await service.get_patients(
        skip=skip,
        limit=limit,
        search=search,
        gender=gender,
        sort_by=sort_by,
        sort_order=sort_order
    )

@router.get("/duplicates", response_model=List[PatientSchema])
async def read_possible_duplicates(
    name: str,
    service: PatientService = Depends(get_patient_service)
):
    """Existing patients whose name contains the one being entered"""
    return await service.find_duplicates(name)

@router.post("/", response_model=PatientSchema, status_code=status.HTTP_201_CREATED)
async def create_patient(
    patient: PatientCreate,
    service: PatientService = Depends(get_patient_service)
):
    return await service.create_patient(patient)

@router.get("/{patient_id}", response_model=PatientDetails)
async def read_patient(
    patient_id: int,
    service: PatientService = Depends(get_patient_service)
):
    patient = await service.get_patient(patient_id)
    if patient is None:
        raise ResourceNotFoundException("Patient")
    return patient

@router.patch("/{patient_id}", response_model=PatientSchema)
async def update_patient(
    patient_id: int,
    changes: PatientUpdate,
    service: PatientService = Depends(get_patient_service)
):
    patient = await service.update_patient(patient_id, changes)
    if patient is None:
        raise ResourceNotFoundException("Patient")
    return patient
