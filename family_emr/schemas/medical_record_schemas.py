from typing import Annotated, List, Literal, Optional, Union
from pydantic import Field, TypeAdapter, ValidationError
from family_emr.models.medical_record_models import VARIANT_FIELDS
from family_emr.schemas.base import CamelModel, camel_key, format_validation_errors, invalid_data_response


class RecordBase(CamelModel):
    patient_id: str = Field(min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    date: str = Field(min_length=1)
    attachments: List[str] = Field(default_factory=list)


class ExamRecord(RecordBase):
    type: Literal['exam']
    exam_type: Optional[str] = None
    requesting_doctor: Optional[str] = None
    observations: Optional[str] = None


class MedicationRecord(RecordBase):
    type: Literal['medication']
    medication_name: Optional[str] = None
    frequency: Optional[str] = None
    usage_type: Optional[Literal['continuous', 'temporary']] = None
    period_of_day: Optional[str] = None
    start_date: Optional[str] = None
    duration: Optional[str] = None
    prescribing_doctor: Optional[str] = None
    indication: Optional[str] = None


class AppointmentRecord(RecordBase):
    type: Literal['appointment']
    clinic_hospital: Optional[str] = None
    doctor: Optional[str] = None
    specialty: Optional[str] = None
    address: Optional[str] = None
    map_url: Optional[str] = None
    time: Optional[str] = None


class HistoryRecord(RecordBase):
    type: Literal['history']


class IncidentRecord(RecordBase):
    type: Literal['incident']


class PendingRecord(RecordBase):
    type: Literal['pending']
    deadline: Optional[str] = None


class CredentialRecord(RecordBase):
    type: Literal['credential']
    service_name: Optional[str] = None
    service_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    additional_notes: Optional[str] = None


MedicalRecordPayload = Annotated[
    Union[ExamRecord, MedicationRecord, AppointmentRecord, HistoryRecord,
          IncidentRecord, PendingRecord, CredentialRecord],
    Field(discriminator='type'),
]

medical_record_adapter = TypeAdapter(MedicalRecordPayload)


def to_record_fields(payload):
    """Spread a validated variant over the flat record columns.

    Columns that belong to other record types are reset to ``None`` so a type
    change never leaves the previous variant's data behind.
    """
    fields = dict.fromkeys(VARIANT_FIELDS)
    fields.update(payload.model_dump())
    return fields


def parse_record(data):
    """Validate a full record payload. Returns ``(fields, error_response)``."""
    try:
        payload = medical_record_adapter.validate_python(data)
    except ValidationError as e:
        return None, invalid_data_response(format_validation_errors(e))
    return to_record_fields(payload), None


def parse_record_update(record, data):
    """Merge a partial payload over ``record`` and revalidate the result."""
    if not isinstance(data, dict):
        return parse_record(data)
    merged = record.to_dict()
    merged.update({camel_key(key): value for key, value in data.items()})
    return parse_record(merged)
