from family_emr.extensions import db
from family_emr.models.patient_models import new_id, utcnow

RECORD_TYPES = ('exam', 'medication', 'appointment', 'history', 'incident', 'pending', 'credential')

# Columns each record type owns on top of the common ones
RECORD_TYPE_FIELDS = {
    'exam': ('exam_type', 'requesting_doctor', 'observations'),
    'medication': ('medication_name', 'frequency', 'usage_type', 'period_of_day',
                   'start_date', 'duration', 'prescribing_doctor', 'indication'),
    'appointment': ('clinic_hospital', 'doctor', 'specialty', 'address', 'map_url', 'time'),
    'history': (),
    'incident': (),
    'pending': ('deadline',),
    'credential': ('service_name', 'service_url', 'username', 'password', 'additional_notes'),
}

VARIANT_FIELDS = tuple(
    field for fields in RECORD_TYPE_FIELDS.values() for field in fields
)

_CAMEL_NAMES = {
    'patient_id': 'patientId',
    'exam_type': 'examType',
    'requesting_doctor': 'requestingDoctor',
    'medication_name': 'medicationName',
    'usage_type': 'usageType',
    'period_of_day': 'periodOfDay',
    'start_date': 'startDate',
    'prescribing_doctor': 'prescribingDoctor',
    'clinic_hospital': 'clinicHospital',
    'map_url': 'mapUrl',
    'service_name': 'serviceName',
    'service_url': 'serviceUrl',
    'additional_notes': 'additionalNotes',
}


class MedicalRecord(db.Model):
    """A dated entry of one of the seven record types attached to a patient.

    The table keeps one flat column per type-specific field; only the columns
    of the record's own type are ever populated or serialized.
    """
    __tablename__ = 'medical_records'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False, index=True)

    # --- Common fields ---
    title = db.Column(db.String(255))
    description = db.Column(db.Text)
    date = db.Column(db.String(32), nullable=False)
    attachments = db.Column(db.JSON, default=list)

    # --- exam ---
    exam_type = db.Column(db.String(255))
    requesting_doctor = db.Column(db.String(255))
    observations = db.Column(db.Text)

    # --- medication ---
    medication_name = db.Column(db.String(255))
    frequency = db.Column(db.String(255))
    usage_type = db.Column(db.String(20))  # 'continuous' or 'temporary'
    period_of_day = db.Column(db.String(50))
    start_date = db.Column(db.String(32))
    duration = db.Column(db.String(100))
    prescribing_doctor = db.Column(db.String(255))
    indication = db.Column(db.Text)

    # --- appointment ---
    clinic_hospital = db.Column(db.String(255))
    doctor = db.Column(db.String(255))
    specialty = db.Column(db.String(255))
    address = db.Column(db.String(1024))
    map_url = db.Column(db.String(1024))
    time = db.Column(db.String(16))

    # --- pending ---
    deadline = db.Column(db.String(32))

    # --- credential ---
    service_name = db.Column(db.String(255))
    service_url = db.Column(db.String(1024))
    username = db.Column(db.String(255))
    password = db.Column(db.String(255))
    additional_notes = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=utcnow)

    @property
    def variant_fields(self):
        return RECORD_TYPE_FIELDS.get(self.type, ())

    def to_dict(self):
        """Serialize the common fields plus the fields of this record's type."""
        result = {
            'id': self.id,
            'patientId': self.patient_id,
            'type': self.type,
            'title': self.title,
            'description': self.description,
            'date': self.date,
            'attachments': list(self.attachments or []),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
        for field in self.variant_fields:
            result[_CAMEL_NAMES.get(field, field)] = getattr(self, field)
        return result

    def __repr__(self):
        return f'<MedicalRecord {self.id}: {self.type} for Patient {self.patient_id}>'
