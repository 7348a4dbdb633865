from fastapi import APIRouter, Depends
from healthcare_api.api import deps
from healthcare_api.api.endpoints import (
    appointments, auth, doctors, home, patients, prescriptions, summary
)

protected = [Depends(deps.get_current_user)]

api_router = APIRouter()
api_router.include_router(home.router, tags=["home"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(patients.router, prefix="/patients", tags=["patients"], dependencies=protected)
api_router.include_router(doctors.router, prefix="/doctors", tags=["doctors"], dependencies=protected)
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"], dependencies=protected)
api_router.include_router(prescriptions.router, prefix="/prescriptions", tags=["prescriptions"], dependencies=protected)
api_router.include_router(summary.router, prefix="/summary", tags=["summary"], dependencies=protected)
