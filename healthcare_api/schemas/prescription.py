from typing import Optional
from pydantic import Field

from healthcare_api.schemas.common import CamelModel, PartialUpdate, RecordBase, WholeNumber


class PrescriptionBase(CamelModel):
    patient_id: WholeNumber = Field(..., ge=1, examples=[1])
    doctor_id: WholeNumber = Field(..., ge=1, examples=[8])
    medication: str = Field(..., min_length=1, examples=["Aspirin"])
    dosage: str = Field(..., min_length=1, examples=["100mg"])
    instructions: str = Field(..., min_length=1, examples=["Once daily with food"])
    date_issued: str = Field(..., min_length=1, examples=["2025-09-15"])


class PrescriptionCreate(PrescriptionBase):
    pass


class PrescriptionUpdate(PartialUpdate):
    patient_id: Optional[WholeNumber] = Field(None, ge=1)
    doctor_id: Optional[WholeNumber] = Field(None, ge=1)
    medication: Optional[str] = Field(None, min_length=1)
    dosage: Optional[str] = Field(None, min_length=1)
    instructions: Optional[str] = Field(None, min_length=1)
    date_issued: Optional[str] = Field(None, min_length=1)


class Prescription(PrescriptionBase, RecordBase):
    pass
