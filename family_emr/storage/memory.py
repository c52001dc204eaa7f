from family_emr.models.patient_models import Patient, new_id, utcnow
from family_emr.models.appointment_models import Appointment
from family_emr.models.medical_record_models import MedicalRecord
from family_emr.models.pending_item_models import PendingItem
from family_emr.models.recent_update_models import RecentUpdate
from family_emr.storage.base import Storage


class MemStorage(Storage):
    """Process-local store. Entities are transient model instances kept in dicts."""

    def __init__(self):
        self.patients = {}
        self.appointments = {}
        self.medical_records = {}
        self.pending_items = {}
        self.recent_updates = {}

    # --- Helpers ---
    @staticmethod
    def _create(collection, model, data):
        entity = model(**data)
        entity.id = new_id()
        entity.created_at = utcnow()
        collection[entity.id] = entity
        return entity

    @staticmethod
    def _update(collection, entity_id, data):
        entity = collection.get(entity_id)
        if entity is None:
            return None
        for key, value in data.items():
            setattr(entity, key, value)
        return entity

    @staticmethod
    def _by_patient(collection, patient_id):
        return [entity for entity in collection.values() if entity.patient_id == patient_id]

    # --- Patients ---
    def get_patients(self):
        return list(self.patients.values())

    def get_patient(self, patient_id):
        return self.patients.get(patient_id)

    def create_patient(self, data):
        return self._create(self.patients, Patient, data)

    def update_patient(self, patient_id, data):
        return self._update(self.patients, patient_id, data)

    def delete_patient(self, patient_id):
        if self.patients.pop(patient_id, None) is None:
            return False
        for collection in (self.medical_records, self.appointments, self.pending_items):
            for entity in self._by_patient(collection, patient_id):
                del collection[entity.id]
        return True

    # --- Appointments ---
    def get_appointments(self):
        return list(self.appointments.values())

    def get_appointments_by_patient(self, patient_id):
        return self._by_patient(self.appointments, patient_id)

    def get_appointment(self, appointment_id):
        return self.appointments.get(appointment_id)

    def create_appointment(self, data):
        return self._create(self.appointments, Appointment, data)

    def update_appointment(self, appointment_id, data):
        return self._update(self.appointments, appointment_id, data)

    def delete_appointment(self, appointment_id):
        return self.appointments.pop(appointment_id, None) is not None

    # --- Medical records ---
    def get_medical_records(self):
        return list(self.medical_records.values())

    def get_medical_records_by_patient(self, patient_id):
        return self._by_patient(self.medical_records, patient_id)

    def get_medical_record(self, record_id):
        return self.medical_records.get(record_id)

    def create_medical_record(self, data):
        return self._create(self.medical_records, MedicalRecord, data)

    def update_medical_record(self, record_id, data):
        return self._update(self.medical_records, record_id, data)

    def delete_medical_record(self, record_id):
        return self.medical_records.pop(record_id, None) is not None

    # --- Pending items ---
    def get_pending_items(self):
        return list(self.pending_items.values())

    def get_pending_items_by_patient(self, patient_id):
        return self._by_patient(self.pending_items, patient_id)

    def get_pending_item(self, item_id):
        return self.pending_items.get(item_id)

    def create_pending_item(self, data):
        return self._create(self.pending_items, PendingItem, data)

    def update_pending_item(self, item_id, data):
        return self._update(self.pending_items, item_id, data)

    def delete_pending_item(self, item_id):
        return self.pending_items.pop(item_id, None) is not None

    # --- Recent updates ---
    def get_recent_updates(self):
        # Reversed first so entries sharing a timestamp still come out newest first
        newest_first = list(reversed(list(self.recent_updates.values())))
        return sorted(newest_first, key=lambda update: update.created_at, reverse=True)

    def create_recent_update(self, data):
        return self._create(self.recent_updates, RecentUpdate, data)
