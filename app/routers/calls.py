import logging

from fastapi import APIRouter

from app.dependencies import VapiDep
from app.mappers.clinic_variables import build_variable_values
from app.schemas.clinic import ClinicCallForm
from app.schemas.responses import AnalysisResult, CallHandle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calls", tags=["calls"])


@router.post("", response_model=CallHandle, status_code=201)
async def start_clinic_call(form: ClinicCallForm, service: VapiDep) -> CallHandle:
    variables = build_variable_values(form)
    handle = await service.initiate_call(
        form.phone_number,
        variables,
        scheduled_at=form.scheduled_at,
    )
    logger.info("Clinic call for %s started: %s", form.clinic_name, handle.id)
    return handle


@router.get("/{call_id}/analysis", response_model=AnalysisResult)
async def get_call_analysis(call_id: str, service: VapiDep) -> AnalysisResult:
    return await service.fetch_analysis(call_id)
