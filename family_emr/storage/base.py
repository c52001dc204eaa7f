from abc import ABC, abstractmethod


class Storage(ABC):
    """CRUD contract shared by every record store backend.

    ``create_*`` assigns a fresh id and creation timestamp. ``update_*``
    merges the given fields and returns ``None`` for an unknown id.
    ``delete_*`` returns whether anything was removed.
    """

    # --- Patients ---
    @abstractmethod
    def get_patients(self): ...

    @abstractmethod
    def get_patient(self, patient_id): ...

    @abstractmethod
    def create_patient(self, data): ...

    @abstractmethod
    def update_patient(self, patient_id, data): ...

    @abstractmethod
    def delete_patient(self, patient_id):
        """Delete a patient together with its records, appointments and pending items."""

    # --- Appointments ---
    @abstractmethod
    def get_appointments(self): ...

    @abstractmethod
    def get_appointments_by_patient(self, patient_id): ...

    @abstractmethod
    def get_appointment(self, appointment_id): ...

    @abstractmethod
    def create_appointment(self, data): ...

    @abstractmethod
    def update_appointment(self, appointment_id, data): ...

    @abstractmethod
    def delete_appointment(self, appointment_id): ...

    # --- Medical records ---
    @abstractmethod
    def get_medical_records(self): ...

    @abstractmethod
    def get_medical_records_by_patient(self, patient_id): ...

    @abstractmethod
    def get_medical_record(self, record_id): ...

    @abstractmethod
    def create_medical_record(self, data): ...

    @abstractmethod
    def update_medical_record(self, record_id, data): ...

    @abstractmethod
    def delete_medical_record(self, record_id): ...

    # --- Pending items ---
    @abstractmethod
    def get_pending_items(self): ...

    @abstractmethod
    def get_pending_items_by_patient(self, patient_id): ...

    @abstractmethod
    def get_pending_item(self, item_id): ...

    @abstractmethod
    def create_pending_item(self, data): ...

    @abstractmethod
    def update_pending_item(self, item_id, data): ...

    @abstractmethod
    def delete_pending_item(self, item_id): ...

    # --- Recent updates (append-only) ---
    @abstractmethod
    def get_recent_updates(self):
        """All feed entries, newest first."""

    @abstractmethod
    def create_recent_update(self, data): ...
