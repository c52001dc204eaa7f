"""View models behind the dashboard and search screens.

Standalone appointments and appointment-typed medical records are two
separate representations of a visit. They are listed side by side, each item
tagged with its ``source``, and never merged in storage.
"""
from datetime import datetime

SOURCE_APPOINTMENT = 'appointment'
SOURCE_MEDICAL_RECORD = 'medical-record'
SOURCE_PENDING_ITEM = 'pending-item'

UNKNOWN_PATIENT = 'Unknown patient'


def parse_schedule(date_str, time_str=None):
    """Parse ``YYYY-MM-DD`` or ``DD/MM/YYYY`` plus an optional ``HH:MM`` time.

    Returns ``None`` when the date or a given time cannot be understood.
    """
    if not date_str:
        return None
    date_str = date_str.strip()
    date_format = '%d/%m/%Y' if '/' in date_str else '%Y-%m-%d'
    try:
        day = datetime.strptime(date_str, date_format)
    except ValueError:
        return None
    if time_str:
        try:
            moment = datetime.strptime(time_str.strip(), '%H:%M')
        except ValueError:
            return None
        return day.replace(hour=moment.hour, minute=moment.minute)
    return day


def _patient_names(storage):
    return {patient.id: patient.name for patient in storage.get_patients()}


def upcoming_appointments(storage, now=None, limit=5):
    """Future visits from both appointment sources, soonest first.

    Items with an unparseable date are kept and listed after the dated ones.
    A valid date paired with an unreadable time is left out.
    """
    now = now or datetime.now()
    names = _patient_names(storage)

    items = [
        {
            'id': appointment.id,
            'patientId': appointment.patient_id,
            'patientName': appointment.patient_name,
            'specialty': appointment.specialty,
            'doctor': appointment.doctor,
            'date': appointment.date,
            'time': appointment.time,
            'location': appointment.location,
            'source': SOURCE_APPOINTMENT,
        }
        for appointment in storage.get_appointments()
    ]
    items.extend(
        {
            'id': record.id,
            'patientId': record.patient_id,
            'patientName': names.get(record.patient_id, UNKNOWN_PATIENT),
            'specialty': record.specialty,
            'doctor': record.doctor,
            'date': record.date,
            'time': record.time,
            'location': record.address or record.clinic_hospital,
            'source': SOURCE_MEDICAL_RECORD,
        }
        for record in storage.get_medical_records()
        if record.type == 'appointment'
    )

    dated, undated = [], []
    for item in items:
        when = parse_schedule(item['date'], item['time'])
        if when is None:
            # A readable date with an unreadable time never counts as upcoming
            if parse_schedule(item['date']) is None:
                undated.append(item)
        elif when > now:
            dated.append((when, item))
    dated.sort(key=lambda pair: pair[0])

    upcoming = [item for _, item in dated] + undated
    return upcoming[:limit] if limit else upcoming


def open_pending_items(storage):
    """Incomplete pending items plus pending-typed medical records."""
    items = [
        {
            'id': item.id,
            'patientId': item.patient_id,
            'title': item.title,
            'description': item.description,
            'priority': item.priority,
            'completed': bool(item.completed),
            'source': SOURCE_PENDING_ITEM,
        }
        for item in storage.get_pending_items()
        if not item.completed
    ]
    items.extend(
        {
            'id': record.id,
            'patientId': record.patient_id,
            'title': record.title or record.description or 'Pending',
            'description': record.description,
            'priority': 'medium',
            'completed': False,
            'deadline': record.deadline,
            'source': SOURCE_MEDICAL_RECORD,
        }
        for record in storage.get_medical_records()
        if record.type == 'pending'
    )
    return items


def _contains(value, term):
    return bool(value) and term in value.lower()


def search(storage, term):
    """Case-insensitive search across patients and medical records."""
    term = (term or '').strip().lower()
    if not term:
        return {'patients': [], 'records': []}

    patients = storage.get_patients()
    names = {patient.id: patient.name for patient in patients}

    matched_patients = [
        patient for patient in patients
        if _contains(patient.name, term)
        or _contains(patient.doctor, term)
        or _contains(patient.blood_type, term)
        or any(_contains(allergy, term) for allergy in patient.allergies or [])
    ]
    matched_records = [
        record for record in storage.get_medical_records()
        if _contains(record.title, term)
        or _contains(record.description, term)
        or _contains(record.type, term)
        or _contains(names.get(record.patient_id), term)
    ]
    return {'patients': matched_patients, 'records': matched_records}


def dashboard_summary(storage, now=None):
    return {
        'patientCount': len(storage.get_patients()),
        'upcomingAppointments': upcoming_appointments(storage, now=now),
        'pendingItems': open_pending_items(storage),
        'recentUpdates': [update.to_dict() for update in storage.get_recent_updates()[:5]],
    }
