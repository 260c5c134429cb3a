from datetime import datetime
from typing import Callable, Optional
from loggers import app_logger
from models import Doctor
from repositories.doctor import DoctorRepository
from schemas import DoctorCreate, DoctorUpdate
from services.listing import filter_records, sort_records, paginate

SEARCH_FIELDS = ("name", "specialization", "department", "email")

SORT_KEYS = {
    "name": lambda d: d.name.lower(),
    "experience": lambda d: d.experience,
    "created_at": lambda d: d.created_at,
}

class DoctorService:
    def __init__(self, repository: DoctorRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    async def get_doctors(
        self,
        skip: int = 0,
        limit: int = 100,
        search: str = None,
        specialization: str = None,
        status: str = None,
        sort_by: str = "name",
        sort_order: str = "asc"
    ) -> dict:
        doctors = await self.repository.get_all()

        def predicate(doctor: Doctor) -> bool:
            if specialization and specialization != "all" and doctor.specialization != specialization:
                return False
            if status and status != "all" and doctor.status != status:
                return False
            return True

        filtered = filter_records(doctors, search, SEARCH_FIELDS, predicate)
        ordered = sort_records(filtered, SORT_KEYS.get(sort_by, SORT_KEYS["name"]), sort_order)
        return paginate(ordered, skip, limit)

    async def get_stats(self) -> dict:
        doctors = await self.repository.get_all()
        specializations = []
        for doctor in doctors:
            if doctor.specialization not in specializations:
                specializations.append(doctor.specialization)
        return {
            "total": len(doctors),
            "active": sum(1 for d in doctors if d.status == "active"),
            "specializations": specializations,
        }

    async def get_doctor(self, doctor_id: int) -> Optional[Doctor]:
        return await self.repository.get_by_id(doctor_id)

    async def create_doctor(self, data: DoctorCreate) -> Doctor:
        now = self.clock()
        doctor = Doctor(**data.model_dump(), created_at=now, updated_at=now)
        doctor = await self.repository.add(doctor)
        app_logger.info(f"Added doctor {doctor.id} ({doctor.specialization})")
        return doctor

    async def update_doctor(self, doctor_id: int, data: DoctorUpdate) -> Optional[Doctor]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        doctor = await self.repository.update(doctor_id, dict(changes, updated_at=self.clock()))
        if doctor is not None:
            app_logger.info(f"Updated doctor {doctor_id}: {sorted(changes)}")
        return doctor

    async def delete_doctor(self, doctor_id: int) -> bool:
        deleted = await self.repository.delete(doctor_id)
        if deleted:
            app_logger.info(f"Removed doctor {doctor_id}")
        return deleted
