from typing import Any, List
from fastapi import APIRouter, Depends, status

from healthcare_api.api import deps
from healthcare_api.domain.records.service import RecordService
from healthcare_api.schemas.common import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from healthcare_api.schemas.doctor import Doctor, DoctorCreate, DoctorUpdate

router = APIRouter()


async def existing_doctor(
    doctor_id: str,
    service: RecordService = Depends(deps.get_doctor_service),
) -> Doctor:
    return service.get_record(doctor_id)


@router.get("", response_model=List[Doctor])
async def read_doctors(
    service: RecordService = Depends(deps.get_doctor_service),
) -> Any:
    """
    List all doctors, unfiltered.
    """
    return service.list_records()


@router.get("/{doctor_id}", response_model=Doctor, responses={404: NOT_FOUND_RESPONSE})
async def read_doctor(
    doctor: Doctor = Depends(existing_doctor),
) -> Any:
    """
    Get doctor by ID.
    """
    return doctor


@router.post(
    "",
    response_model=Doctor,
    status_code=status.HTTP_201_CREATED,
    responses={400: VALIDATION_RESPONSE},
)
async def create_doctor(
    *,
    doctor_in: DoctorCreate,
    service: RecordService = Depends(deps.get_doctor_service),
) -> Any:
    """
    Create a doctor. The id is assigned by the server.
    """
    return service.create_record(doctor_in)


@router.put(
    "/{doctor_id}",
    response_model=Doctor,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def replace_doctor(
    *,
    doctor_in: DoctorCreate,
    current: Doctor = Depends(existing_doctor),
    service: RecordService = Depends(deps.get_doctor_service),
) -> Any:
    """
    Replace a doctor wholesale, keeping its id.
    """
    return service.replace_record(current.id, doctor_in)


@router.patch(
    "/{doctor_id}",
    response_model=Doctor,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def patch_doctor(
    *,
    doctor_in: DoctorUpdate,
    current: Doctor = Depends(existing_doctor),
    service: RecordService = Depends(deps.get_doctor_service),
) -> Any:
    """
    Partially update a doctor. Only the fields sent are changed.
    """
    return service.patch_record(current.id, doctor_in)


@router.delete("/{doctor_id}", response_model=Doctor, responses={404: NOT_FOUND_RESPONSE})
async def delete_doctor(
    doctor_id: str,
    service: RecordService = Depends(deps.get_doctor_service),
) -> Any:
    """
    Delete a doctor and return the deleted record.
    """
    return service.delete_record(doctor_id)
