import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    AnalysisFetchFailure,
    CallInitiationFailure,
    CallNotReadyError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


async def invalid_argument_handler(_request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.warning("Invalid argument: %s", exc.message)
    return JSONResponse(status_code=422, content={"detail": exc.message})


async def call_initiation_error_handler(
    _request: Request, exc: CallInitiationFailure
) -> JSONResponse:
    logger.error("Call initiation failed: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Failed to make outbound call: {exc.message}"},
    )


async def call_not_ready_handler(_request: Request, exc: CallNotReadyError) -> JSONResponse:
    logger.info("Analysis requested for unfinished call (status=%s)", exc.status)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message, "status": exc.status},
    )


async def analysis_fetch_error_handler(
    _request: Request, exc: AnalysisFetchFailure
) -> JSONResponse:
    logger.error("Analysis fetch failed: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Failed to get call details: {exc.message}"},
    )
