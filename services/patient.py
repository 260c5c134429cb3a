from datetime import datetime
from typing import Callable, Optional
from exceptions import DuplicatePatientException
from loggers import app_logger
from models import Patient
from repositories.patient import PatientRepository
from schemas import PatientCreate, PatientUpdate
from services.listing import filter_records, sort_records, paginate

SEARCH_FIELDS = ("name", "phone", "city")

SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "created_at": lambda p: p.created_at,
}

# Shorter names match too many records to be a useful duplicate hint.
DUPLICATE_HINT_MIN_LENGTH = 3

class PatientService:
    def __init__(self, repository: PatientRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    async def get_patients(
        self,
        skip: int = 0,
        limit: int = 100,
        search: str = None,
        gender: str = None,
        sort_by: str = "name",
        sort_order: str = "asc"
    ) -> dict:
        patients = await self.repository.get_all()

        predicate = None
        if gender and gender != "all":
            predicate = lambda p: p.gender == gender

        filtered = filter_records(patients, search, SEARCH_FIELDS, predicate)
        ordered = sort_records(filtered, SORT_KEYS.get(sort_by, SORT_KEYS["name"]), sort_order)
        return paginate(ordered, skip, limit)

    async def get_patient(self, patient_id: int) -> Optional[Patient]:
        return await self.repository.get_by_id_with_history(patient_id)

    async def find_duplicates(self, name: str) -> list[Patient]:
        """Patients whose name contains `name`, shown while a new record is typed in."""
        if not name or len(name) < DUPLICATE_HINT_MIN_LENGTH:
            return []
        patients = await self.repository.get_all()
        return filter_records(patients, name, ("name",))

    async def create_patient(self, data: PatientCreate) -> Patient:
        patients = await self.repository.get_all()
        for existing in patients:
            if existing.name.lower() == data.name.lower() and existing.phone == data.phone:
                app_logger.warning(f"Rejected duplicate patient {data.name!r} ({data.phone})")
                raise DuplicatePatientException()

        now = self.clock()
        patient = Patient(**data.model_dump(), created_at=now, updated_at=now)
        patient = await self.repository.add(patient)
        app_logger.info(f"Registered patient {patient.id}")
        return patient

    async def update_patient(self, patient_id: int, data: PatientUpdate) -> Optional[Patient]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        patient = await self.repository.update(patient_id, dict(changes, updated_at=self.clock()))
        if patient is not None:
            app_logger.info(f"Updated patient {patient_id}: {sorted(changes)}")
        return patient
