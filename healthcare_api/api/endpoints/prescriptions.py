from typing import Any, List
from fastapi import APIRouter, Depends, status

from healthcare_api.api import deps
from healthcare_api.domain.records.service import RecordService
from healthcare_api.schemas.common import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from healthcare_api.schemas.prescription import Prescription, PrescriptionCreate, PrescriptionUpdate

router = APIRouter()


async def existing_prescription(
    prescription_id: str,
    service: RecordService = Depends(deps.get_prescription_service),
) -> Prescription:
    return service.get_record(prescription_id)


@router.get("", response_model=List[Prescription])
async def read_prescriptions(
    service: RecordService = Depends(deps.get_prescription_service),
) -> Any:
    """
    List all prescriptions.
    """
    return service.list_records()


@router.get("/{prescription_id}", response_model=Prescription, responses={404: NOT_FOUND_RESPONSE})
async def read_prescription(
    prescription: Prescription = Depends(existing_prescription),
) -> Any:
    """
    Get prescription by ID.
    """
    return prescription


@router.post(
    "",
    response_model=Prescription,
    status_code=status.HTTP_201_CREATED,
    responses={400: VALIDATION_RESPONSE},
)
async def create_prescription(
    *,
    prescription_in: PrescriptionCreate,
    service: RecordService = Depends(deps.get_prescription_service),
) -> Any:
    """
    Issue a prescription.
    """
    return service.create_record(prescription_in)


@router.put(
    "/{prescription_id}",
    response_model=Prescription,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def replace_prescription(
    *,
    prescription_in: PrescriptionCreate,
    current: Prescription = Depends(existing_prescription),
    service: RecordService = Depends(deps.get_prescription_service),
) -> Any:
    """
    Replace a prescription wholesale, keeping its id.
    """
    return service.replace_record(current.id, prescription_in)


@router.patch(
    "/{prescription_id}",
    response_model=Prescription,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def patch_prescription(
    *,
    prescription_in: PrescriptionUpdate,
    current: Prescription = Depends(existing_prescription),
    service: RecordService = Depends(deps.get_prescription_service),
) -> Any:
    """
    Partially update a prescription. Only the fields sent are changed.
    """
    return service.patch_record(current.id, prescription_in)


@router.delete("/{prescription_id}", response_model=Prescription, responses={404: NOT_FOUND_RESPONSE})
async def delete_prescription(
    prescription_id: str,
    service: RecordService = Depends(deps.get_prescription_service),
) -> Any:
    """
    Delete a prescription and return the deleted record.
    """
    return service.delete_record(prescription_id)
