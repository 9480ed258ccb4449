from datetime import datetime, timedelta, timezone

from app.mappers.analysis_mapper import (
    build_analysis_result,
    build_transcript,
    compute_duration_seconds,
)
from app.schemas.vapi import VapiCall

STARTED = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def _call(**fields) -> VapiCall:
    data = {"id": "call-1", "status": "completed"}
    data.update(fields)
    return VapiCall.model_validate(data)


def test_duration_from_timestamps():
    call = _call(
        startedAt=STARTED.isoformat(),
        endedAt=(STARTED + timedelta(milliseconds=125000)).isoformat(),
    )
    assert compute_duration_seconds(call) == 125


def test_duration_absent_without_end():
    call = _call(startedAt=STARTED.isoformat())
    assert compute_duration_seconds(call) is None


def test_transcript_mapping_preserves_order():
    call = _call(messages=[
        {"role": "assistant", "message": "Hello", "secondsFromStart": 2.5},
        {"role": "user", "message": "Hi, is this the clinic?", "secondsFromStart": 3.1},
        {"role": "assistant", "message": "Yes it is", "secondsFromStart": 5.0},
    ])

    transcript = build_transcript(call)

    assert [e.role for e in transcript] == ["assistant", "user", "assistant"]
    first = transcript[0]
    assert (first.role, first.content, first.offset_seconds) == ("assistant", "Hello", 2.5)
    assert transcript[2].content == "Yes it is"


def test_transcript_empty_when_messages_absent():
    assert build_transcript(_call()) == []
    assert build_transcript(_call(messages=None)) == []


def test_missing_structured_data_defaults():
    result = build_analysis_result(_call())

    assert result.main_topics == []
    assert result.customer_preferences == []
    assert result.customer_questions == []
    assert result.action_items == []
    assert result.overall_sentiment is None
    assert result.appointment_confirmed is False
    assert result.timestamp is None
    assert result.duration_seconds is None
    assert result.customer_phone is None


def test_null_structured_fields_default():
    result = build_analysis_result(_call(structuredData={
        "mainTopics": None,
        "overallSentiment": None,
        "appointmentConfirmed": None,
    }))

    assert result.main_topics == []
    assert result.overall_sentiment is None
    assert result.appointment_confirmed is False


def test_full_projection():
    result = build_analysis_result(_call(
        startedAt="2024-05-01T10:00:00.000Z",
        endedAt="2024-05-01T10:01:30.500Z",
        destination={"number": "+15551234567"},
        structuredData={
            "mainTopics": ["cardiology consult"],
            "customerPreferences": ["afternoon slots"],
            "customerQuestions": ["Do you accept insurance?"],
            "actionItems": ["Email forms"],
            "overallSentiment": "neutral",
            "appointmentConfirmed": True,
        },
    ))

    assert result.call_id == "call-1"
    assert result.status == "completed"
    assert result.timestamp == STARTED
    assert result.duration_seconds == 90.5
    assert result.customer_phone == "+15551234567"
    assert result.main_topics == ["cardiology consult"]
    assert result.customer_preferences == ["afternoon slots"]
    assert result.customer_questions == ["Do you accept insurance?"]
    assert result.action_items == ["Email forms"]
    assert result.overall_sentiment == "neutral"
    assert result.appointment_confirmed is True


def test_structured_data_from_analysis_block():
    """Vapi also nests structured data under `analysis`."""
    result = build_analysis_result(_call(
        analysis={"structuredData": {"mainTopics": ["refill"], "appointmentConfirmed": True}},
    ))

    assert result.main_topics == ["refill"]
    assert result.appointment_confirmed is True


def test_single_string_topic_becomes_list():
    result = build_analysis_result(_call(structuredData={"actionItems": "Call back tomorrow"}))
    assert result.action_items == ["Call back tomorrow"]


def test_serializes_with_camel_case_keys():
    result = build_analysis_result(_call(messages=[
        {"role": "assistant", "message": "Hello", "secondsFromStart": 2.5},
    ]))

    data = result.model_dump(by_alias=True)

    assert data["callId"] == "call-1"
    assert data["appointmentConfirmed"] is False
    assert data["transcript"] == [
        {"role": "assistant", "content": "Hello", "offsetSeconds": 2.5},
    ]


def test_duration_with_naive_and_aware_timestamps():
    call = _call(
        startedAt="2024-05-01T10:00:00.000Z",
        endedAt="2024-05-01T10:02:05",
    )
    assert compute_duration_seconds(call) == 125


def test_naive_start_timestamp_reported_as_utc():
    result = build_analysis_result(_call(startedAt="2024-05-01T10:00:00"))
    assert result.timestamp == STARTED
    assert result.timestamp.tzinfo is not None
