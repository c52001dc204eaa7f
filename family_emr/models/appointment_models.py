from family_emr.extensions import db
from family_emr.models.patient_models import new_id, utcnow


class Appointment(db.Model):
    """Standalone appointment, listed by the dashboard next to appointment-typed records."""
    __tablename__ = 'appointments'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), nullable=False, index=True)
    patient_name = db.Column(db.String(255), nullable=False)  # denormalized for display

    specialty = db.Column(db.String(255), nullable=False)
    doctor = db.Column(db.String(255), nullable=False)
    date = db.Column(db.String(32), nullable=False)
    time = db.Column(db.String(16), nullable=False)
    location = db.Column(db.String(1024), nullable=False)

    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'patientId': self.patient_id,
            'patientName': self.patient_name,
            'specialty': self.specialty,
            'doctor': self.doctor,
            'date': self.date,
            'time': self.time,
            'location': self.location,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Appointment {self.id}: {self.specialty} on {self.date} {self.time}>'
