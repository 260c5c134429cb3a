import asyncio
from datetime import datetime
from types import SimpleNamespace

from schemas import DoctorUpdate, PatientUpdate
from services.doctor import DoctorService
from services.patient import PatientService

STAMP = datetime(2026, 10, 19, 8, 30)


class RecordingRepository:
    """Stands in for a repository; keeps the last partial update it was given."""

    def __init__(self):
        self.changes = None

    async def update(self, id, changes):
        self.changes = changes
        return SimpleNamespace(id=id, **changes)


def test_patient_update_is_stamped_by_service_clock():
    repository = RecordingRepository()
    service = PatientService(repository, clock=lambda: STAMP)

    asyncio.run(service.update_patient(1, PatientUpdate(city="Mumbai")))

    assert repository.changes == {"city": "Mumbai", "updated_at": STAMP}


def test_doctor_update_is_stamped_by_service_clock():
    repository = RecordingRepository()
    service = DoctorService(repository, clock=lambda: STAMP)

    asyncio.run(service.update_doctor(2, DoctorUpdate(status="on-leave", phone=None)))

    assert repository.changes == {"status": "on-leave", "updated_at": STAMP}
