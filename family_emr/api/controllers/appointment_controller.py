from flask import request, jsonify, current_app
from family_emr.extensions import db
from family_emr.schemas.base import parse_payload
from family_emr.schemas.appointment_schemas import AppointmentCreate, AppointmentUpdate
from family_emr.storage import get_storage


def get_appointments():
    """Gets all standalone appointments, or one patient's with ?patientId=."""
    patient_id = request.args.get('patientId')
    storage = get_storage()
    try:
        if patient_id:
            appointments = storage.get_appointments_by_patient(patient_id)
        else:
            appointments = storage.get_appointments()
        return jsonify([appt.to_dict() for appt in appointments]), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching appointments: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch appointments'}), 500


def get_appointment_by_id(appointment_id):
    try:
        appointment = get_storage().get_appointment(appointment_id)
        if not appointment:
            return jsonify({'message': 'Appointment not found'}), 404
        return jsonify(appointment.to_dict()), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching appointment {appointment_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch appointment'}), 500


def create_appointment():
    data, error = parse_payload(AppointmentCreate, request.get_json(silent=True) or {})
    if error:
        return error

    try:
        appointment = get_storage().create_appointment(data)
        return jsonify(appointment.to_dict()), 201
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating appointment: {e}", exc_info=True)
        return jsonify({'message': 'Failed to create appointment'}), 500


def update_appointment(appointment_id):
    data, error = parse_payload(AppointmentUpdate, request.get_json(silent=True) or {}, partial=True)
    if error:
        return error

    try:
        appointment = get_storage().update_appointment(appointment_id, data)
        if not appointment:
            return jsonify({'message': 'Appointment not found'}), 404
        return jsonify(appointment.to_dict()), 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating appointment {appointment_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to update appointment'}), 500


def delete_appointment(appointment_id):
    try:
        if not get_storage().delete_appointment(appointment_id):
            return jsonify({'message': 'Appointment not found'}), 404
        return '', 204
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting appointment {appointment_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to delete appointment'}), 500
