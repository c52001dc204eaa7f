from flask import request, jsonify, current_app
from family_emr.extensions import db
from family_emr.schemas.medical_record_schemas import parse_record, parse_record_update
from family_emr.services.activity import record_medical_record_created
from family_emr.storage import get_storage


def get_medical_records():
    """Lists records, optionally narrowed by ?patientId= and ?type=."""
    patient_id = request.args.get('patientId')
    record_type = request.args.get('type')
    storage = get_storage()
    try:
        if patient_id:
            records = storage.get_medical_records_by_patient(patient_id)
        else:
            records = storage.get_medical_records()
        if record_type:
            records = [record for record in records if record.type == record_type]
        return jsonify([record.to_dict() for record in records]), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching medical records: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch medical records'}), 500


def get_medical_record_by_id(record_id):
    try:
        record = get_storage().get_medical_record(record_id)
        if not record:
            return jsonify({'message': 'Medical record not found'}), 404
        return jsonify(record.to_dict()), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching medical record {record_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch medical record'}), 500


def create_medical_record():
    data, error = parse_record(request.get_json(silent=True) or {})
    if error:
        return error

    storage = get_storage()
    try:
        record = storage.create_medical_record(data)
        record_medical_record_created(storage, record)
        return jsonify(record.to_dict()), 201
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating medical record: {e}", exc_info=True)
        return jsonify({'message': 'Failed to create medical record'}), 500


def update_medical_record(record_id):
    """Merges the sent fields over the stored record and revalidates it as its type."""
    storage = get_storage()
    try:
        record = storage.get_medical_record(record_id)
        if not record:
            return jsonify({'message': 'Medical record not found'}), 404

        data, error = parse_record_update(record, request.get_json(silent=True) or {})
        if error:
            return error

        record = storage.update_medical_record(record_id, data)
        return jsonify(record.to_dict()), 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating medical record {record_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to update medical record'}), 500


def delete_medical_record(record_id):
    try:
        if not get_storage().delete_medical_record(record_id):
            return jsonify({'message': 'Medical record not found'}), 404
        return '', 204
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting medical record {record_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to delete medical record'}), 500
