from family_emr.extensions import db
from family_emr.models.patient_models import Patient, new_id, utcnow
from family_emr.models.appointment_models import Appointment
from family_emr.models.medical_record_models import MedicalRecord
from family_emr.models.pending_item_models import PendingItem
from family_emr.models.recent_update_models import RecentUpdate
from family_emr.storage.base import Storage


class DatabaseStorage(Storage):
    """SQLAlchemy-backed store. Every call commits its own transaction."""

    # --- Helpers ---
    @staticmethod
    def _create(model, data):
        entity = model(**data)
        entity.id = new_id()
        entity.created_at = utcnow()
        db.session.add(entity)
        db.session.commit()
        return entity

    @staticmethod
    def _update(model, entity_id, data):
        entity = db.session.get(model, entity_id)
        if entity is None:
            return None
        for key, value in data.items():
            setattr(entity, key, value)
        db.session.commit()
        return entity

    @staticmethod
    def _delete(model, entity_id):
        entity = db.session.get(model, entity_id)
        if entity is None:
            return False
        db.session.delete(entity)
        db.session.commit()
        return True

    @staticmethod
    def _all(model):
        return db.session.execute(db.select(model).order_by(model.created_at)).scalars().all()

    @staticmethod
    def _by_patient(model, patient_id):
        query = db.select(model).filter_by(patient_id=patient_id).order_by(model.created_at)
        return db.session.execute(query).scalars().all()

    # --- Patients ---
    def get_patients(self):
        return self._all(Patient)

    def get_patient(self, patient_id):
        return db.session.get(Patient, patient_id)

    def create_patient(self, data):
        return self._create(Patient, data)

    def update_patient(self, patient_id, data):
        return self._update(Patient, patient_id, data)

    def delete_patient(self, patient_id):
        patient = db.session.get(Patient, patient_id)
        if patient is None:
            return False
        for model in (MedicalRecord, Appointment, PendingItem):
            db.session.execute(db.delete(model).where(model.patient_id == patient_id))
        db.session.delete(patient)
        db.session.commit()
        return True

    # --- Appointments ---
    def get_appointments(self):
        return self._all(Appointment)

    def get_appointments_by_patient(self, patient_id):
        return self._by_patient(Appointment, patient_id)

    def get_appointment(self, appointment_id):
        return db.session.get(Appointment, appointment_id)

    def create_appointment(self, data):
        return self._create(Appointment, data)

    def update_appointment(self, appointment_id, data):
        return self._update(Appointment, appointment_id, data)

    def delete_appointment(self, appointment_id):
        return self._delete(Appointment, appointment_id)

    # --- Medical records ---
    def get_medical_records(self):
        return self._all(MedicalRecord)

    def get_medical_records_by_patient(self, patient_id):
        return self._by_patient(MedicalRecord, patient_id)

    def get_medical_record(self, record_id):
        return db.session.get(MedicalRecord, record_id)

    def create_medical_record(self, data):
        return self._create(MedicalRecord, data)

    def update_medical_record(self, record_id, data):
        return self._update(MedicalRecord, record_id, data)

    def delete_medical_record(self, record_id):
        return self._delete(MedicalRecord, record_id)

    # --- Pending items ---
    def get_pending_items(self):
        return self._all(PendingItem)

    def get_pending_items_by_patient(self, patient_id):
        return self._by_patient(PendingItem, patient_id)

    def get_pending_item(self, item_id):
        return db.session.get(PendingItem, item_id)

    def create_pending_item(self, data):
        return self._create(PendingItem, data)

    def update_pending_item(self, item_id, data):
        return self._update(PendingItem, item_id, data)

    def delete_pending_item(self, item_id):
        return self._delete(PendingItem, item_id)

    # --- Recent updates ---
    def get_recent_updates(self):
        query = db.select(RecentUpdate).order_by(RecentUpdate.created_at.desc())
        return db.session.execute(query).scalars().all()

    def create_recent_update(self, data):
        return self._create(RecentUpdate, data)
