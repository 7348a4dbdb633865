from typing import Optional
from pydantic import Field

from healthcare_api.schemas.common import CamelModel, PartialUpdate, RecordBase


class DoctorBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Dr. Alice Johnson"])
    specialty: str = Field(..., min_length=1, examples=["Cardiology"])
    contact_info: str = Field(..., min_length=1, examples=["alice.johnson@hospital.com"])


class DoctorCreate(DoctorBase):
    pass


class DoctorUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    specialty: Optional[str] = Field(None, min_length=1)
    contact_info: Optional[str] = Field(None, min_length=1)


class Doctor(DoctorBase, RecordBase):
    pass
