from flask import request, jsonify, current_app
from family_emr.extensions import db
from family_emr.schemas.base import parse_payload, invalid_data_response
from family_emr.schemas.patient_schemas import PatientCreate, PatientUpdate, apply_sensitive_rules
from family_emr.services.activity import record_patient_created
from family_emr.storage import get_storage


def get_all_patients():
    """Lists every registered family member."""
    try:
        patients = get_storage().get_patients()
        return jsonify([patient.to_dict() for patient in patients]), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching patients: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch patients'}), 500


def get_patient_by_id(patient_id):
    try:
        patient = get_storage().get_patient(patient_id)
        if not patient:
            return jsonify({'message': 'Patient not found'}), 404
        return jsonify(patient.to_dict()), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching patient {patient_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch patient'}), 500


def register_patient():
    """Creates a patient and appends the matching recent update."""
    data, error = parse_payload(PatientCreate, request.get_json(silent=True) or {})
    if error:
        return error

    storage = get_storage()
    try:
        patient = storage.create_patient(data)
        record_patient_created(storage, patient)
        return jsonify(patient.to_dict()), 201
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating patient: {e}", exc_info=True)
        return jsonify({'message': 'Failed to create patient'}), 500


def update_patient(patient_id):
    """Applies a partial update; fields not sent are left untouched."""
    changes, error = parse_payload(PatientUpdate, request.get_json(silent=True) or {}, partial=True)
    if error:
        return error

    storage = get_storage()
    try:
        patient = storage.get_patient(patient_id)
        if not patient:
            return jsonify({'message': 'Patient not found'}), 404

        field_errors = apply_sensitive_rules(patient, changes)
        if field_errors:
            return invalid_data_response(field_errors)

        patient = storage.update_patient(patient_id, changes)
        return jsonify(patient.to_dict()), 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating patient {patient_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to update patient'}), 500


def delete_patient(patient_id):
    """Deletes a patient along with its records, appointments and pending items."""
    try:
        if not get_storage().delete_patient(patient_id):
            return jsonify({'message': 'Patient not found'}), 404
        return '', 204
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting patient {patient_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to delete patient'}), 500
