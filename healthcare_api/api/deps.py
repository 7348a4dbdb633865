from typing import Any, Dict, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from healthcare_api.core import security
from healthcare_api.core.config import settings
from healthcare_api.core.exceptions import AuthenticationError
from healthcare_api.domain.records.service import RecordService
from healthcare_api.domain.summary.service import SummaryService
from healthcare_api.infrastructure.store import DataStore, get_store

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """Resolve the caller; everyone is the demo user while USE_AUTH is off"""
    if not settings.USE_AUTH:
        return dict(security.MOCK_USER)

    if credentials is None:
        raise AuthenticationError("Not authenticated")

    payload = security.verify_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Could not validate credentials")
    return security.user_from_payload(payload)


def get_patient_service(store: DataStore = Depends(get_store)) -> RecordService:
    return RecordService(store.patients, "Patient")


def get_doctor_service(store: DataStore = Depends(get_store)) -> RecordService:
    return RecordService(store.doctors, "Doctor")


def get_appointment_service(store: DataStore = Depends(get_store)) -> RecordService:
    return RecordService(
        store.appointments,
        "Appointment",
        references={"patient_id": store.patients, "doctor_id": store.doctors},
        enforce_references=settings.ENFORCE_REFERENCES,
    )


def get_prescription_service(store: DataStore = Depends(get_store)) -> RecordService:
    return RecordService(
        store.prescriptions,
        "Prescription",
        references={"patient_id": store.patients, "doctor_id": store.doctors},
        enforce_references=settings.ENFORCE_REFERENCES,
    )


def get_summary_service(store: DataStore = Depends(get_store)) -> SummaryService:
    return SummaryService(store)
