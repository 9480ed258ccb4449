from datetime import datetime, timezone

from app.schemas.responses import AnalysisResult, TranscriptEntry
from app.schemas.vapi import VapiCall


def _as_str_list(value) -> list[str]:
    """Coerce a structured-data value into a list of strings.

    Missing values become an empty list; a bare string becomes a one-item list.
    """
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _structured_data(call: VapiCall) -> dict:
    if call.structured_data:
        return call.structured_data
    if call.analysis and call.analysis.structured_data:
        return call.analysis.structured_data
    return {}


def _as_utc(value: datetime | None) -> datetime | None:
    # Vapi timestamps without an offset are UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def compute_duration_seconds(call: VapiCall) -> float | None:
    started_at = _as_utc(call.started_at)
    ended_at = _as_utc(call.ended_at)
    if started_at is None or ended_at is None:
        return None
    return (ended_at - started_at).total_seconds()


def build_transcript(call: VapiCall) -> list[TranscriptEntry]:
    return [
        TranscriptEntry(
            role=msg.role,
            content=msg.message,
            offset_seconds=msg.seconds_from_start,
        )
        for msg in call.messages or []
    ]


def build_analysis_result(call: VapiCall) -> AnalysisResult:
    data = _structured_data(call)
    sentiment = data.get("overallSentiment")

    return AnalysisResult(
        call_id=call.id,
        timestamp=_as_utc(call.started_at),
        duration_seconds=compute_duration_seconds(call),
        status=call.status,
        customer_phone=call.destination.number if call.destination else None,
        main_topics=_as_str_list(data.get("mainTopics")),
        customer_preferences=_as_str_list(data.get("customerPreferences")),
        customer_questions=_as_str_list(data.get("customerQuestions")),
        action_items=_as_str_list(data.get("actionItems")),
        overall_sentiment=str(sentiment) if sentiment else None,
        appointment_confirmed=bool(data.get("appointmentConfirmed", False)),
        transcript=build_transcript(call),
    )
