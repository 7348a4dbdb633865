from typing import Any, List
from fastapi import APIRouter, Depends, status

from healthcare_api.api import deps
from healthcare_api.domain.records.service import RecordService
from healthcare_api.schemas.common import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from healthcare_api.schemas.patient import Patient, PatientCreate, PatientUpdate

router = APIRouter()


async def existing_patient(
    patient_id: str,
    service: RecordService = Depends(deps.get_patient_service),
) -> Patient:
    return service.get_record(patient_id)


@router.get("", response_model=List[Patient])
async def read_patients(
    service: RecordService = Depends(deps.get_patient_service),
) -> Any:
    """
    List all patients.
    """
    return service.list_records()


@router.get("/{patient_id}", response_model=Patient, responses={404: NOT_FOUND_RESPONSE})
async def read_patient(
    patient: Patient = Depends(existing_patient),
) -> Any:
    """
    Get patient by ID.
    """
    return patient


@router.post(
    "",
    response_model=Patient,
    status_code=status.HTTP_201_CREATED,
    responses={400: VALIDATION_RESPONSE},
)
async def create_patient(
    *,
    patient_in: PatientCreate,
    service: RecordService = Depends(deps.get_patient_service),
) -> Any:
    """
    Create a patient. The id is assigned by the server.
    """
    return service.create_record(patient_in)


@router.put(
    "/{patient_id}",
    response_model=Patient,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def replace_patient(
    *,
    patient_in: PatientCreate,
    current: Patient = Depends(existing_patient),
    service: RecordService = Depends(deps.get_patient_service),
) -> Any:
    """
    Replace a patient wholesale, keeping its id.
    """
    return service.replace_record(current.id, patient_in)


@router.patch(
    "/{patient_id}",
    response_model=Patient,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def patch_patient(
    *,
    patient_in: PatientUpdate,
    current: Patient = Depends(existing_patient),
    service: RecordService = Depends(deps.get_patient_service),
) -> Any:
    """
    Partially update a patient. Only the fields sent are changed.
    """
    return service.patch_record(current.id, patient_in)


@router.delete("/{patient_id}", response_model=Patient, responses={404: NOT_FOUND_RESPONSE})
async def delete_patient(
    patient_id: str,
    service: RecordService = Depends(deps.get_patient_service),
) -> Any:
    """
    Delete a patient and return the deleted record.
    """
    return service.delete_record(patient_id)
