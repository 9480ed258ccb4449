from app.exceptions.custom import InvalidArgumentError
from app.schemas.clinic import ClinicCallForm


def build_variable_values(form: ClinicCallForm) -> dict[str, str]:
    """Turn the clinic form into the assistant's script variables."""
    procedures = [p.strip() for p in form.procedures if p and p.strip()]
    if not procedures:
        raise InvalidArgumentError("At least one procedure is required")

    return {
        "clinicName": form.clinic_name,
        "doctorName": form.doctor_name,
        "speciality": form.speciality.value,
        "procedures": ", ".join(procedures),
    }
