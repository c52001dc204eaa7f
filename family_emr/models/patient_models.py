import uuid
from datetime import datetime, timezone
from family_emr.extensions import db

BLOOD_TYPES = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')
DEFAULT_AVATAR = '👤'


def utcnow():
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid.uuid4())


class Patient(db.Model):
    """A family member whose medical data is tracked."""
    __tablename__ = 'patients'

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    name = db.Column(db.String(255), nullable=False)
    birth_date = db.Column(db.String(32), nullable=False)
    blood_type = db.Column(db.String(3))
    doctor = db.Column(db.String(255))  # attending doctor's name
    allergies = db.Column(db.JSON, default=list)
    photo_url = db.Column(db.String(1024), default=DEFAULT_AVATAR)

    # --- Emergency contact ---
    emergency_contact_name = db.Column(db.String(255))
    emergency_contact_phone = db.Column(db.String(64))

    # --- Insurance ---
    insurance_plan = db.Column(db.String(255))
    insurance_number = db.Column(db.String(128))

    # --- Document images (upload paths) ---
    insurance_card_front_url = db.Column(db.String(1024))
    insurance_card_back_url = db.Column(db.String(1024))
    id_card_front_url = db.Column(db.String(1024))
    id_card_back_url = db.Column(db.String(1024))

    # Plaintext on purpose: this only drives the presentation gate
    sensitive_data_password_active = db.Column(db.Boolean, default=False, nullable=False)
    sensitive_data_password = db.Column(db.String(255))

    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        """Convert patient to dictionary for API responses."""
        return {
            'id': self.id,
            'name': self.name,
            'birthDate': self.birth_date,
            'bloodType': self.blood_type,
            'doctor': self.doctor,
            'allergies': list(self.allergies or []),
            'photoUrl': self.photo_url,
            'emergencyContactName': self.emergency_contact_name,
            'emergencyContactPhone': self.emergency_contact_phone,
            'insurancePlan': self.insurance_plan,
            'insuranceNumber': self.insurance_number,
            'insuranceCardFrontUrl': self.insurance_card_front_url,
            'insuranceCardBackUrl': self.insurance_card_back_url,
            'idCardFrontUrl': self.id_card_front_url,
            'idCardBackUrl': self.id_card_back_url,
            'sensitiveDataPasswordActive': bool(self.sensitive_data_password_active),
            'sensitiveDataPassword': self.sensitive_data_password,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Patient {self.id}: {self.name}>'
