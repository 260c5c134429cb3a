from datetime import datetime
from typing import Literal, Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


Gender = Literal["male", "female", "other"]
DoctorStatus = Literal["active", "inactive", "on-leave"]
AppointmentStatus = Literal["scheduled", "completed", "cancelled", "rescheduled"]


class PatientCreate(BaseModel):
    """Fields accepted when registering a patient. Name, phone, gender and date of birth are required."""
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    gender: Gender
    date_of_birth: str = Field(min_length=1)  # YYYY-MM-DD
    preferred_language: str = "English"
    city: str = ""
    address: str = ""
    pin_code: str = ""


class PatientUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[Gender] = None
    date_of_birth: Optional[str] = None
    preferred_language: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    pin_code: Optional[str] = None


class Patient(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    """
    Represents a registered patient.

    created_at is set once when the record is inserted and is what the
    month-over-month patient growth figure is computed from.
    """

    id: int
    name: str
    phone: str
    gender: Gender
    date_of_birth: str
    preferred_language: str
    city: str
    address: str
    pin_code: str
    created_at: datetime
    updated_at: datetime


class PaginatedPatientsResponse(BaseModel):
    data: List["Patient"]
    total: int


class DaySchedule(BaseModel):
    start: str  # HH:MM
    end: str  # HH:MM
    available: bool


class DoctorCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    phone: str
    specialization: str
    department: str
    experience: int = Field(default=0, ge=0)
    qualifications: List[str] = []
    availability: Dict[str, DaySchedule] = {}
    status: DoctorStatus = "active"


class DoctorUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    specialization: Optional[str] = None
    department: Optional[str] = None
    experience: Optional[int] = Field(default=None, ge=0)
    qualifications: Optional[List[str]] = None
    availability: Optional[Dict[str, DaySchedule]] = None
    status: Optional[DoctorStatus] = None


class Doctor(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    specialization: str
    department: str
    experience: int  # Years of experience
    qualifications: List[str]
    availability: Dict[str, DaySchedule]
    status: DoctorStatus
    created_at: datetime
    updated_at: datetime


class PaginatedDoctorsResponse(BaseModel):
    data: List["Doctor"]
    total: int


class DoctorStats(BaseModel):
    total: int
    active: int
    specializations: List[str]


class AppointmentCreate(BaseModel):
    patient_id: int
    doctor_id: int
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(pattern=r"^\d{2}:\d{2}$")
    reason: str = ""
    status: AppointmentStatus = "scheduled"


class AppointmentUpdate(BaseModel):
    doctor_id: Optional[int] = None
    date: Optional[str] = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    reason: Optional[str] = None
    status: Optional[AppointmentStatus] = None


class AppointmentSummary(BaseModel):
    """Appointment as listed on a patient's history (no nested parties)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    doctor_id: int
    date: str
    time: str
    reason: str
    status: AppointmentStatus
    created_at: datetime


class Appointment(AppointmentSummary):
    """
    Represents a booked visit.

    Status:
    - "scheduled": booked and still to happen (counted as pending)
    - "completed": the visit took place
    - "cancelled" / "rescheduled": excluded from the completed and pending counts
    """
    updated_at: datetime
    patient_name: Optional[str] = None  # computed
    doctor_name: Optional[str] = None  # computed


class PaginatedAppointmentsResponse(BaseModel):
    data: List["Appointment"]
    total: int


class ConsultationCreate(BaseModel):
    appointment_id: Optional[int] = None
    patient_id: int
    doctor_id: int
    symptoms: str = ""
    diagnosis: str = ""
    prescription: List[str] = []
    notes: str = ""


class Consultation(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    """One consultation is one billable unit in the revenue figures."""

    id: int
    appointment_id: Optional[int]
    patient_id: int
    doctor_id: int
    symptoms: str
    diagnosis: str
    prescription: List[str]
    notes: str
    created_at: datetime
    patient_name: Optional[str] = None  # computed
    doctor_name: Optional[str] = None  # computed


class PaginatedConsultationsResponse(BaseModel):
    data: List["Consultation"]
    total: int


class PatientDetails(Patient):
    appointments: List["AppointmentSummary"] = []
    consultations: List["Consultation"] = []


class TaskCreate(BaseModel):
    doctor_id: Optional[int] = None
    title: str = Field(min_length=1)
    description: str = ""
    due_date: str = Field(min_length=1)


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    completed: Optional[bool] = None


class Task(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    doctor_id: Optional[int]
    title: str
    description: str
    due_date: str
    completed: bool
    created_at: datetime


class PaginatedTasksResponse(BaseModel):
    data: List["Task"]
    total: int


class TaskStats(BaseModel):
    total: int
    completed: int
    pending: int
    overdue: int


class Medicine(BaseModel):
    id: str
    name: str
    generic_name: str
    dosage: str
    form: Literal["tablet", "capsule", "syrup", "injection", "cream", "drops", "inhaler"]
    category: str
