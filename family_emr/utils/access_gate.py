# /family_emr/utils/access_gate.py
"""Presentation-side gate for sensitive record types.

This is a convenience toggle for shared household screens, not access
control: the password is compared in plaintext and the API serves every
record regardless of it.
"""

SENSITIVE_RECORD_TYPES = frozenset({'exam', 'history', 'credential'})


def is_sensitive(record):
    record_type = record.get('type') if isinstance(record, dict) else getattr(record, 'type', None)
    return record_type in SENSITIVE_RECORD_TYPES


class SensitiveAccessGate:
    """Tracks whether sensitive records of one patient are revealed in a view."""

    def __init__(self, patient):
        self.patient = patient
        self.authenticated = False

    def _field(self, name, key):
        if isinstance(self.patient, dict):
            return self.patient.get(key)
        return getattr(self.patient, name, None)

    @property
    def protection_active(self):
        return bool(self._field('sensitive_data_password_active', 'sensitiveDataPasswordActive'))

    @property
    def is_locked(self):
        return self.protection_active and not self.authenticated

    def unlock(self, password):
        """Compare ``password`` with the patient's stored one; reveal on match."""
        if not self.protection_active:
            return True
        stored = self._field('sensitive_data_password', 'sensitiveDataPassword')
        if stored and password == stored:
            self.authenticated = True
        return self.authenticated

    def lock(self):
        self.authenticated = False

    def filter_records(self, records):
        """Records visible in the current state of the gate."""
        if not self.is_locked:
            return list(records)
        return [record for record in records if not is_sensitive(record)]

    def hidden_count(self, records):
        return len(records) - len(self.filter_records(records))
