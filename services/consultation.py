from datetime import datetime
from typing import Callable, Optional
from exceptions import ResourceNotFoundException
from loggers import app_logger
from models import Appointment, Consultation, Doctor, Patient
from repositories.consultation import ConsultationRepository
from schemas import ConsultationCreate
from services.listing import filter_records, sort_records, paginate

def attach_names(consultation: Consultation) -> Consultation:
    consultation.patient_name = consultation.patient.name if consultation.patient else "Unknown Patient"
    consultation.doctor_name = consultation.doctor.name if consultation.doctor else "Unknown Doctor"
    return consultation

SEARCH_FIELDS = (
    lambda c: c.patient_name,
    "symptoms",
    "diagnosis",
)

SORT_KEYS = {
    "created_at": lambda c: c.created_at,
    "patient_name": lambda c: c.patient_name.lower(),
}

class ConsultationService:
    def __init__(self, repository: ConsultationRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    async def get_consultations(
        self,
        skip: int = 0,
        limit: int = 100,
        search: str = None,
        doctor_id: int = None,
        sort_by: str = "created_at",
        sort_order: str = "desc"
    ) -> dict:
        consultations = await self.repository.get_all_with_parties()
        for consultation in consultations:
            attach_names(consultation)

        predicate = None
        if doctor_id is not None:
            predicate = lambda c: c.doctor_id == doctor_id

        filtered = filter_records(consultations, search, SEARCH_FIELDS, predicate)
        ordered = sort_records(filtered, SORT_KEYS.get(sort_by, SORT_KEYS["created_at"]), sort_order)
        return paginate(ordered, skip, limit)

    async def get_consultation(self, consultation_id: int) -> Optional[Consultation]:
        consultation = await self.repository.get_by_id_with_parties(consultation_id)
        if consultation is not None:
            attach_names(consultation)
        return consultation

    async def create_consultation(self, data: ConsultationCreate) -> Consultation:
        session = self.repository.session
        patient = await session.get(Patient, data.patient_id)
        if patient is None:
            raise ResourceNotFoundException("Patient")
        doctor = await session.get(Doctor, data.doctor_id)
        if doctor is None:
            raise ResourceNotFoundException("Doctor")
        if data.appointment_id is not None and await session.get(Appointment, data.appointment_id) is None:
            raise ResourceNotFoundException("Appointment")

        consultation = Consultation(**data.model_dump(), created_at=self.clock())
        consultation = await self.repository.add(consultation)
        consultation.patient_name = patient.name
        consultation.doctor_name = doctor.name
        app_logger.info(f"Recorded consultation {consultation.id} for patient {patient.id}")
        return consultation
