from fastapi import APIRouter, Depends
from typing import List

from services.medicine import MedicineService
from schemas import Medicine

"""
Controller for the medicine catalog used when writing prescriptions.
The catalog is bundled with the application and read-only.
"""

router = APIRouter(prefix="/medicines", tags=["Medicines"])

def get_medicine_service() -> MedicineService:
    return MedicineService()

@router.get("/search", response_model=List[Medicine])
async def search_medicines(q: str = "", service: MedicineService = Depends(get_medicine_service)):
    return service.search(q)

@router.get("/categories", response_model=List[str])
async def read_categories(service: MedicineService = Depends(get_medicine_service)):
    return service.categories()
