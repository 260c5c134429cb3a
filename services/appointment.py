from datetime import datetime
from typing import Callable, Optional
from exceptions import ResourceNotFoundException
from loggers import app_logger
from models import Appointment, Doctor, Patient
from repositories.appointment import AppointmentRepository
from schemas import AppointmentCreate, AppointmentUpdate
from services.listing import filter_records, sort_records, paginate

STATUSES = ("scheduled", "completed", "cancelled", "rescheduled")

SEARCH_FIELDS = (
    "reason",
    lambda a: a.patient_name,
    lambda a: a.doctor_name,
)

SORT_KEYS = {
    "date": lambda a: (a.date, a.time),
    "status": lambda a: a.status,
    "created_at": lambda a: a.created_at,
}

def attach_names(appointment: Appointment) -> Appointment:
    """Populate the computed party names shown on listings"""
    appointment.patient_name = appointment.patient.name if appointment.patient else "Unknown Patient"
    appointment.doctor_name = appointment.doctor.name if appointment.doctor else "Unknown Doctor"
    return appointment

class AppointmentService:
    def __init__(self, repository: AppointmentRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    def _date_predicate(self, date_filter: Optional[str]):
        # Dates are stored as YYYY-MM-DD, so string comparison is chronological.
        today = self.clock().date().isoformat()
        if date_filter == "today":
            return lambda a: a.date == today
        if date_filter == "upcoming":
            return lambda a: a.date > today
        if date_filter == "past":
            return lambda a: a.date < today
        return None

    async def get_appointments(
        self,
        skip: int = 0,
        limit: int = 100,
        search: str = None,
        status: str = None,
        date_filter: str = None,  # "today", "upcoming", "past"
        sort_by: str = "date",
        sort_order: str = "desc"
    ) -> dict:
        appointments = [attach_names(a) for a in await self.repository.get_all_with_parties()]

        on_date = self._date_predicate(date_filter)

        def predicate(appointment: Appointment) -> bool:
            if status and status != "all" and appointment.status != status:
                return False
            return on_date is None or on_date(appointment)

        filtered = filter_records(appointments, search, SEARCH_FIELDS, predicate)
        ordered = sort_records(filtered, SORT_KEYS.get(sort_by, SORT_KEYS["date"]), sort_order)
        return paginate(ordered, skip, limit)

    async def get_stats(self) -> list[dict]:
        """Appointment counts per status, every status listed even when zero"""
        appointments = await self.repository.get_all()
        counts = {s: 0 for s in STATUSES}
        for appointment in appointments:
            if appointment.status in counts:
                counts[appointment.status] += 1
        return [{"label": s, "value": counts[s]} for s in STATUSES]

    async def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        appointment = await self.repository.get_by_id_with_parties(appointment_id)
        if appointment is not None:
            attach_names(appointment)
        return appointment

    async def _require(self, model, record_id: int, label: str):
        record = await self.repository.session.get(model, record_id)
        if record is None:
            app_logger.warning(f"{label} {record_id} not found")
            raise ResourceNotFoundException(label)
        return record

    async def create_appointment(self, data: AppointmentCreate) -> Appointment:
        patient = await self._require(Patient, data.patient_id, "Patient")
        doctor = await self._require(Doctor, data.doctor_id, "Doctor")

        now = self.clock()
        appointment = Appointment(**data.model_dump(), created_at=now, updated_at=now)
        appointment = await self.repository.add(appointment)
        appointment.patient_name = patient.name
        appointment.doctor_name = doctor.name
        app_logger.info(f"Booked appointment {appointment.id} on {appointment.date} {appointment.time}")
        return appointment

    async def update_appointment(self, appointment_id: int, data: AppointmentUpdate) -> Optional[Appointment]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("doctor_id") is not None:
            await self._require(Doctor, changes["doctor_id"], "Doctor")
        if await self.repository.update(appointment_id, dict(changes, updated_at=self.clock())) is None:
            return None
        app_logger.info(f"Updated appointment {appointment_id}: {sorted(changes)}")
        return await self.get_appointment(appointment_id)
