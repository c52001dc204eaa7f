from flask import current_app
from family_emr.extensions import db

PATIENT_ICON = '👤'
DEFAULT_RECORD_ICON = '📝'
RECORD_TYPE_ICONS = {
    'exam': '📋',
    'medication': '💊',
    'appointment': '📅',
    'history': '📝',
    'incident': '⚠️',
    'pending': '📋',
    'credential': '🔑',
}


def record_patient_created(storage, patient):
    """Append the feed entry for a newly registered patient."""
    return _append(storage, {
        'patient_id': patient.id,
        'patient_name': patient.name,
        'description': 'New patient registered',
        'icon': PATIENT_ICON,
    })


def record_medical_record_created(storage, record):
    """Append the feed entry for a new medical record.

    Skipped when the owning patient does not exist.
    """
    patient = storage.get_patient(record.patient_id)
    if patient is None:
        current_app.logger.debug(f"No recent update for record {record.id}: patient {record.patient_id} not found")
        return None
    return _append(storage, {
        'patient_id': patient.id,
        'patient_name': patient.name,
        'description': f'New record added: {record.type}',
        'icon': RECORD_TYPE_ICONS.get(record.type, DEFAULT_RECORD_ICON),
    })


def _append(storage, data):
    # The primary write has already succeeded; a feed failure must not undo it
    try:
        return storage.create_recent_update(data)
    except Exception as e:
        db.session.rollback()
        current_app.logger.warning(f"Failed to append recent update for patient {data['patient_id']}: {e}")
        return None
