from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CallHandle(BaseModel):
    id: str


class TranscriptEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    role: str
    content: str | None = None
    offset_seconds: float | None = None


class AnalysisResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    call_id: str
    timestamp: datetime | None = None
    duration_seconds: float | None = None
    status: str
    customer_phone: str | None = None
    main_topics: list[str] = []
    customer_preferences: list[str] = []
    customer_questions: list[str] = []
    action_items: list[str] = []
    overall_sentiment: str | None = None
    appointment_confirmed: bool = False
    transcript: list[TranscriptEntry] = []
