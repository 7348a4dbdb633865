from typing import Any
from fastapi import APIRouter, Depends

from healthcare_api.api import deps
from healthcare_api.domain.summary.service import SummaryService
from healthcare_api.schemas.summary import SummaryResponse

router = APIRouter()


@router.get("", response_model=SummaryResponse)
async def read_summary(
    service: SummaryService = Depends(deps.get_summary_service),
) -> Any:
    """
    Get healthcare system statistics: totals per resource, appointments by
    status, doctors by specialty and the average patient age.
    """
    return service.get_summary()
