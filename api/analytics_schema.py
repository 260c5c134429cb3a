from datetime import date
from pydantic import BaseModel
from typing import List

class TrendPoint(BaseModel):
    date: date  # Calendar day, serialised as "YYYY-MM-DD"
    count: int

class AnalyticsSummary(BaseModel):
    total_patients: int
    total_appointments: int
    completed_appointments: int
    pending_appointments: int  # status == "scheduled" only
    total_revenue: float
    monthly_revenue: float
    patient_growth: float  # Percent, month over month; 0 when last month had none
    appointment_trends: List[TrendPoint]  # Trailing 30 days, oldest first

class StatusCount(BaseModel):
    label: str
    value: int
