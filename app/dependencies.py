from typing import Annotated

from fastapi import Depends, Request

from app.services.vapi import VapiService


def get_vapi_service(request: Request) -> VapiService:
    return request.app.state.vapi_service


VapiDep = Annotated[VapiService, Depends(get_vapi_service)]
