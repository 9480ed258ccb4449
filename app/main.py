import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    AnalysisFetchFailure,
    CallInitiationFailure,
    CallNotReadyError,
    InvalidArgumentError,
)
from app.exceptions.handlers import (
    analysis_fetch_error_handler,
    call_initiation_error_handler,
    call_not_ready_handler,
    invalid_argument_handler,
)
from app.routers.calls import router as calls_router
from app.services.vapi import VapiService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        app.state.vapi_service = VapiService(
            client,
            settings.vapi_api_key,
            settings.vapi_assistant_id,
            settings.vapi_phone_number_id,
            base_url=settings.vapi_base_url,
        )
        yield


app = FastAPI(title="Clinic Call Assistant", lifespan=lifespan)

app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
app.add_exception_handler(CallInitiationFailure, call_initiation_error_handler)
app.add_exception_handler(CallNotReadyError, call_not_ready_handler)
app.add_exception_handler(AnalysisFetchFailure, analysis_fetch_error_handler)

app.include_router(calls_router)
