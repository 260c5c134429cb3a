from datetime import datetime
from typing import List, Optional
from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from database import Base


class Patient(Base):
    __tablename__ = "patients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String)
    phone: Mapped[str] = mapped_column(String)
    gender: Mapped[str] = mapped_column(
        String
    )  # "male" | "female" | "other"
    date_of_birth: Mapped[str] = mapped_column(String)  # YYYY-MM-DD
    preferred_language: Mapped[str] = mapped_column(String, default="English")
    city: Mapped[str] = mapped_column(String, default="")
    address: Mapped[str] = mapped_column(String, default="")
    pin_code: Mapped[str] = mapped_column(String, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime)  # Set once on insert
    updated_at: Mapped[datetime] = mapped_column(DateTime)

    appointments: Mapped[List["Appointment"]] = relationship(back_populates="patient")
    consultations: Mapped[List["Consultation"]] = relationship(back_populates="patient")


class Doctor(Base):
    __tablename__ = "doctors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String)
    phone: Mapped[str] = mapped_column(String)
    specialization: Mapped[str] = mapped_column(String)
    department: Mapped[str] = mapped_column(String)
    experience: Mapped[int] = mapped_column(Integer, default=0)  # In years
    qualifications: Mapped[list] = mapped_column(JSON, default=list)
    # Weekday name -> {"start": "09:00", "end": "17:00", "available": true}
    availability: Mapped[dict] = mapped_column(JSON, default=dict)
    status: Mapped[str] = mapped_column(String, default="active")  # active | inactive | on-leave
    created_at: Mapped[datetime] = mapped_column(DateTime)
    updated_at: Mapped[datetime] = mapped_column(DateTime)


class Appointment(Base):
    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    patient_id: Mapped[int] = mapped_column(ForeignKey("patients.id"))
    doctor_id: Mapped[int] = mapped_column(ForeignKey("doctors.id"))
    date: Mapped[str] = mapped_column(String)  # YYYY-MM-DD
    time: Mapped[str] = mapped_column(String)  # HH:MM
    reason: Mapped[str] = mapped_column(String, default="")
    status: Mapped[str] = mapped_column(String, default="scheduled")
    created_at: Mapped[datetime] = mapped_column(DateTime)
    updated_at: Mapped[datetime] = mapped_column(DateTime)

    patient: Mapped["Patient"] = relationship(back_populates="appointments")
    doctor: Mapped["Doctor"] = relationship()


class Consultation(Base):
    __tablename__ = "consultations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    appointment_id: Mapped[Optional[int]] = mapped_column(ForeignKey("appointments.id"), nullable=True)
    patient_id: Mapped[int] = mapped_column(ForeignKey("patients.id"))
    doctor_id: Mapped[int] = mapped_column(ForeignKey("doctors.id"))
    symptoms: Mapped[str] = mapped_column(String, default="")
    diagnosis: Mapped[str] = mapped_column(String, default="")
    prescription: Mapped[list] = mapped_column(JSON, default=list)  # Medicine strings
    notes: Mapped[str] = mapped_column(String, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime)

    patient: Mapped["Patient"] = relationship(back_populates="consultations")
    doctor: Mapped["Doctor"] = relationship()


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    doctor_id: Mapped[Optional[int]] = mapped_column(ForeignKey("doctors.id"), nullable=True)
    title: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(String, default="")
    due_date: Mapped[str] = mapped_column(String)  # ISO date or datetime string
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime)
