from datetime import datetime

from pydantic import BaseModel, Field


class VapiMessage(BaseModel):
    role: str = ""  # "system" | "bot" | "assistant" | "user" | "tool_calls" ...
    message: str | None = None
    seconds_from_start: float | None = Field(default=None, alias="secondsFromStart")


class VapiDestination(BaseModel):
    number: str | None = None


class VapiCallAnalysis(BaseModel):
    structured_data: dict | None = Field(default=None, alias="structuredData")


class VapiCall(BaseModel):
    id: str = ""
    status: str = ""  # queued | ringing | in-progress | completed | failed ...
    started_at: datetime | None = Field(default=None, alias="startedAt")
    ended_at: datetime | None = Field(default=None, alias="endedAt")
    destination: VapiDestination | None = None
    structured_data: dict | None = Field(default=None, alias="structuredData")
    analysis: VapiCallAnalysis | None = None
    messages: list[VapiMessage] | None = None
