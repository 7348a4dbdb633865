from typing import Any, List
from fastapi import APIRouter, Depends, status

from healthcare_api.api import deps
from healthcare_api.domain.records.service import RecordService
from healthcare_api.schemas.common import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from healthcare_api.schemas.appointment import Appointment, AppointmentCreate, AppointmentUpdate

router = APIRouter()


async def existing_appointment(
    appointment_id: str,
    service: RecordService = Depends(deps.get_appointment_service),
) -> Appointment:
    return service.get_record(appointment_id)


@router.get("", response_model=List[Appointment])
async def read_appointments(
    service: RecordService = Depends(deps.get_appointment_service),
) -> Any:
    """
    List all appointments.
    """
    return service.list_records()


@router.get("/{appointment_id}", response_model=Appointment, responses={404: NOT_FOUND_RESPONSE})
async def read_appointment(
    appointment: Appointment = Depends(existing_appointment),
) -> Any:
    """
    Get appointment by ID.
    """
    return appointment


@router.post(
    "",
    response_model=Appointment,
    status_code=status.HTTP_201_CREATED,
    responses={400: VALIDATION_RESPONSE},
)
async def create_appointment(
    *,
    appointment_in: AppointmentCreate,
    service: RecordService = Depends(deps.get_appointment_service),
) -> Any:
    """
    Create an appointment. The id is assigned by the server.
    """
    return service.create_record(appointment_in)


@router.put(
    "/{appointment_id}",
    response_model=Appointment,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def replace_appointment(
    *,
    appointment_in: AppointmentCreate,
    current: Appointment = Depends(existing_appointment),
    service: RecordService = Depends(deps.get_appointment_service),
) -> Any:
    """
    Replace an appointment wholesale, keeping its id.
    """
    return service.replace_record(current.id, appointment_in)


@router.patch(
    "/{appointment_id}",
    response_model=Appointment,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def patch_appointment(
    *,
    appointment_in: AppointmentUpdate,
    current: Appointment = Depends(existing_appointment),
    service: RecordService = Depends(deps.get_appointment_service),
) -> Any:
    """
    Partially update an appointment, e.g. `{"status": "completed"}`.
    Only the fields sent are changed.
    """
    return service.patch_record(current.id, appointment_in)


@router.delete("/{appointment_id}", response_model=Appointment, responses={404: NOT_FOUND_RESPONSE})
async def delete_appointment(
    appointment_id: str,
    service: RecordService = Depends(deps.get_appointment_service),
) -> Any:
    """
    Delete an appointment and return the deleted record.
    """
    return service.delete_record(appointment_id)
