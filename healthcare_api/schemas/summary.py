from typing import Dict
from pydantic import Field

from healthcare_api.schemas.common import CamelModel


class SummaryResponse(CamelModel):
    """System statistics derived from the current collections"""
    total_patients: int
    total_doctors: int
    total_appointments: int
    total_prescriptions: int
    appointments_by_status: Dict[str, int] = Field(default_factory=dict)
    doctors_by_specialty: Dict[str, int] = Field(default_factory=dict)
    average_patient_age: int
    timestamp: str
    system_status: str = "operational"
