from family_emr.extensions import db
from family_emr.models.patient_models import new_id, utcnow

PRIORITIES = ('low', 'medium', 'high')


class PendingItem(db.Model):
    """An outstanding task or reminder for a patient."""
    __tablename__ = 'pending_items'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), nullable=False, index=True)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    priority = db.Column(db.String(10), default='medium')
    completed = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'patientId': self.patient_id,
            'title': self.title,
            'description': self.description,
            'priority': self.priority,
            'completed': bool(self.completed),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
