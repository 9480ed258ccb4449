from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Speciality(StrEnum):
    cardiology = "cardiology"
    dermatology = "dermatology"
    neurology = "neurology"
    orthopedics = "orthopedics"
    pediatrics = "pediatrics"
    psychiatry = "psychiatry"
    general = "general"


class ClinicCallForm(BaseModel):
    """Fields collected from the clinic call form.

    Accepts both snake_case and the camelCase names the web form posts.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    phone_number: str = Field(min_length=1)  # E.164, validated by Vapi
    clinic_name: str = Field(min_length=1)
    doctor_name: str = Field(min_length=1)
    speciality: Speciality
    procedures: list[str] = Field(min_length=1)
    scheduled_at: datetime | None = None
