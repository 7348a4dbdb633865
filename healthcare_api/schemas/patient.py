from typing import Optional
from pydantic import Field

from healthcare_api.schemas.common import CamelModel, PartialUpdate, RecordBase, WholeNumber


class PatientBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["John Doe"])
    age: WholeNumber = Field(..., ge=0, examples=[30])
    gender: str = Field(..., min_length=1, examples=["male"])
    medical_history: str = Field(..., min_length=1, examples=["None"])
    contact_info: str = Field(..., min_length=1, examples=["john.doe@email.com"])


class PatientCreate(PatientBase):
    pass


class PatientUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    age: Optional[WholeNumber] = Field(None, ge=0)
    gender: Optional[str] = Field(None, min_length=1)
    medical_history: Optional[str] = Field(None, min_length=1)
    contact_info: Optional[str] = Field(None, min_length=1)


class Patient(PatientBase, RecordBase):
    pass
