from enum import Enum
from typing import Optional
from pydantic import Field

from healthcare_api.schemas.common import CamelModel, PartialUpdate, RecordBase, WholeNumber


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    IN_PROGRESS = "in-progress"


class AppointmentBase(CamelModel):
    patient_id: WholeNumber = Field(..., ge=1, examples=[1])
    doctor_id: WholeNumber = Field(..., ge=1, examples=[3])
    date: str = Field(..., min_length=1, examples=["2025-09-25"])
    time: str = Field(..., min_length=1, examples=["14:30"])
    reason: str = Field(..., min_length=1, examples=["Annual checkup"])
    status: AppointmentStatus = Field(..., examples=["scheduled"])


class AppointmentCreate(AppointmentBase):
    pass


class AppointmentUpdate(PartialUpdate):
    patient_id: Optional[WholeNumber] = Field(None, ge=1)
    doctor_id: Optional[WholeNumber] = Field(None, ge=1)
    date: Optional[str] = Field(None, min_length=1)
    time: Optional[str] = Field(None, min_length=1)
    reason: Optional[str] = Field(None, min_length=1)
    status: Optional[AppointmentStatus] = Field(None, examples=["completed"])


class Appointment(AppointmentBase, RecordBase):
    pass
