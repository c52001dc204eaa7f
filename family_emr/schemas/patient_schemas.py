from typing import List, Literal, Optional
from pydantic import Field, ValidationInfo, field_validator
from family_emr.models.patient_models import DEFAULT_AVATAR
from family_emr.schemas.base import CamelModel

BloodType = Literal['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']

PASSWORD_REQUIRED_MESSAGE = 'A password is required while sensitive data protection is active'


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class PatientCreate(CamelModel):
    name: str = Field(min_length=1)
    birth_date: str = Field(min_length=1)
    blood_type: Optional[BloodType] = None
    doctor: Optional[str] = None
    allergies: List[str] = Field(default_factory=list)
    photo_url: Optional[str] = DEFAULT_AVATAR
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    insurance_plan: Optional[str] = None
    insurance_number: Optional[str] = None
    insurance_card_front_url: Optional[str] = None
    insurance_card_back_url: Optional[str] = None
    id_card_front_url: Optional[str] = None
    id_card_back_url: Optional[str] = None
    sensitive_data_password_active: bool = False
    sensitive_data_password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator('name', 'birth_date')
    @classmethod
    def not_blank(cls, value):
        if not value.strip():
            raise ValueError('must not be blank')
        return value

    @field_validator('blood_type', mode='before')
    @classmethod
    def empty_blood_type(cls, value):
        return _blank_to_none(value)

    @field_validator('sensitive_data_password')
    @classmethod
    def password_matches_flag(cls, value, info: ValidationInfo):
        if not info.data.get('sensitive_data_password_active'):
            return None
        if not value:
            raise ValueError(PASSWORD_REQUIRED_MESSAGE)
        return value


class PatientUpdate(CamelModel):
    """Partial update; only the fields sent by the client are applied."""
    name: str = Field(default=None, min_length=1)
    birth_date: str = Field(default=None, min_length=1)
    blood_type: Optional[BloodType] = None
    doctor: Optional[str] = None
    allergies: List[str] = None
    photo_url: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    insurance_plan: Optional[str] = None
    insurance_number: Optional[str] = None
    insurance_card_front_url: Optional[str] = None
    insurance_card_back_url: Optional[str] = None
    id_card_front_url: Optional[str] = None
    id_card_back_url: Optional[str] = None
    sensitive_data_password_active: bool = None
    sensitive_data_password: Optional[str] = None

    @field_validator('name', 'birth_date')
    @classmethod
    def not_blank(cls, value):
        if not value.strip():
            raise ValueError('must not be blank')
        return value

    @field_validator('blood_type', mode='before')
    @classmethod
    def empty_blood_type(cls, value):
        return _blank_to_none(value)


def apply_sensitive_rules(patient, changes):
    """Keep the password consistent with the protection flag.

    Turning the flag off clears the stored password. Returns a list of field
    errors when the resulting state would be active without a password.
    """
    if changes.get('sensitive_data_password_active') is False:
        changes['sensitive_data_password'] = None
        return []

    active = changes.get('sensitive_data_password_active', patient.sensitive_data_password_active)
    password = changes.get('sensitive_data_password', patient.sensitive_data_password)
    if active and not password:
        return [{
            'path': ['sensitiveDataPassword'],
            'message': PASSWORD_REQUIRED_MESSAGE,
            'code': 'missing',
        }]
    if not active and 'sensitive_data_password' in changes:
        changes['sensitive_data_password'] = None
    return []
