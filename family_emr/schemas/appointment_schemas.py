from pydantic import Field
from family_emr.schemas.base import CamelModel


class AppointmentCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    patient_name: str = Field(min_length=1)
    specialty: str = Field(min_length=1)
    doctor: str = Field(min_length=1)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    location: str = Field(min_length=1)


class AppointmentUpdate(CamelModel):
    patient_id: str = Field(default=None, min_length=1)
    patient_name: str = Field(default=None, min_length=1)
    specialty: str = Field(default=None, min_length=1)
    doctor: str = Field(default=None, min_length=1)
    date: str = Field(default=None, min_length=1)
    time: str = Field(default=None, min_length=1)
    location: str = Field(default=None, min_length=1)
