import logging
from datetime import datetime

import httpx
from pydantic import ValidationError

from app.exceptions.custom import (
    AnalysisFetchFailure,
    CallInitiationFailure,
    CallNotReadyError,
    InvalidArgumentError,
)
from app.mappers.analysis_mapper import build_analysis_result
from app.schemas.responses import AnalysisResult, CallHandle
from app.schemas.vapi import VapiCall

logger = logging.getLogger(__name__)

COMPLETED_STATUS = "completed"


def _error_message(resp: httpx.Response) -> str:
    """Pull Vapi's error message out of a failed response.

    Falls back to the HTTP reason phrase when the body carries none.
    """
    try:
        body = resp.json()
    except ValueError:
        body = None

    message = body.get("message") if isinstance(body, dict) else None
    if isinstance(message, list):
        message = "; ".join(str(m) for m in message)
    elif message is not None:
        message = str(message)
    return message or resp.reason_phrase or f"HTTP {resp.status_code}"


def _describe_transport_error(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return f"Request to Vapi timed out ({type(exc).__name__})"
    if isinstance(exc, httpx.ConnectError):
        return "Could not connect to Vapi"
    text = str(exc).strip()
    return text or type(exc).__name__


class VapiService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        assistant_id: str,
        phone_number_id: str,
        base_url: str,
    ):
        self._client = client
        self._headers = {"Authorization": f"Bearer {api_key}"}
        self._assistant_id = assistant_id
        self._phone_number_id = phone_number_id
        self._call_url = f"{base_url.rstrip('/')}/call"

    async def initiate_call(
        self,
        customer_number: str,
        variables: dict[str, str] | None = None,
        phone_number_id: str | None = None,
        scheduled_at: datetime | None = None,
    ) -> CallHandle:
        phone_number_id = phone_number_id or self._phone_number_id
        if not customer_number:
            raise InvalidArgumentError("Customer phone number is required")
        if not phone_number_id:
            raise InvalidArgumentError("Phone number id is required")

        payload: dict = {
            "assistantId": self._assistant_id,
            "phoneNumberId": phone_number_id,
            "customer": {"number": customer_number},
            "assistantOverrides": {"variableValues": variables or {}},
        }
        if scheduled_at is not None:
            payload["schedulePlan"] = {"earliestAt": scheduled_at.isoformat()}

        logger.info("Starting outbound call to %s", customer_number)
        try:
            resp = await self._client.post(
                self._call_url, json=payload, headers=self._headers
            )
        except httpx.HTTPError as exc:
            raise CallInitiationFailure(_describe_transport_error(exc)) from exc

        if not resp.is_success:
            raise CallInitiationFailure(_error_message(resp), status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise CallInitiationFailure("Malformed response from Vapi") from exc

        call_id = data.get("id") if isinstance(data, dict) else None
        if not call_id:
            raise CallInitiationFailure("Vapi response did not include a call id")

        logger.info("Outbound call created: call_id=%s", call_id)
        return CallHandle(id=str(call_id))

    async def get_call(self, call_id: str) -> dict:
        """Fetch the raw call record; its fields are validated by the caller."""
        if not call_id:
            raise InvalidArgumentError("Call ID is required for analysis")

        try:
            resp = await self._client.get(
                f"{self._call_url}/{call_id}", headers=self._headers
            )
        except httpx.HTTPError as exc:
            raise AnalysisFetchFailure(_describe_transport_error(exc)) from exc

        if not resp.is_success:
            raise AnalysisFetchFailure(_error_message(resp), status_code=resp.status_code)

        try:
            record = resp.json()
        except ValueError as exc:
            raise AnalysisFetchFailure("Malformed call record from Vapi") from exc

        if not isinstance(record, dict):
            raise AnalysisFetchFailure("Malformed call record from Vapi")
        return record

    async def fetch_analysis(self, call_id: str) -> AnalysisResult:
        record = await self.get_call(call_id)
        status = str(record.get("status") or "")
        logger.info("Fetched call %s (status=%s)", call_id, status)

        # Unfinished records are reported by status alone, whatever else they carry.
        if status != COMPLETED_STATUS:
            raise CallNotReadyError(status)

        try:
            call = VapiCall.model_validate(record)
        except ValidationError as exc:
            raise AnalysisFetchFailure("Malformed call record from Vapi") from exc

        return build_analysis_result(call)
