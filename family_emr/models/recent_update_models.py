from family_emr.extensions import db
from family_emr.models.patient_models import new_id, utcnow


class RecentUpdate(db.Model):
    """Append-only activity feed entry."""
    __tablename__ = 'recent_updates'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    # No foreign key: entries outlive the patient they describe
    patient_id = db.Column(db.String(36), nullable=False, index=True)
    patient_name = db.Column(db.String(255), nullable=False)

    description = db.Column(db.String(512), nullable=False)
    icon = db.Column(db.String(16), nullable=False)

    created_at = db.Column(db.DateTime, default=utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'patientId': self.patient_id,
            'patientName': self.patient_name,
            'description': self.description,
            'icon': self.icon,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
