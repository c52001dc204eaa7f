from flask import request, jsonify, current_app
from family_emr.extensions import db
from family_emr.schemas.base import parse_payload
from family_emr.schemas.pending_item_schemas import PendingItemCreate, PendingItemUpdate
from family_emr.storage import get_storage


def get_pending_items():
    patient_id = request.args.get('patientId')
    storage = get_storage()
    try:
        if patient_id:
            items = storage.get_pending_items_by_patient(patient_id)
        else:
            items = storage.get_pending_items()
        return jsonify([item.to_dict() for item in items]), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching pending items: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch pending items'}), 500


def create_pending_item():
    data, error = parse_payload(PendingItemCreate, request.get_json(silent=True) or {})
    if error:
        return error

    try:
        item = get_storage().create_pending_item(data)
        return jsonify(item.to_dict()), 201
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating pending item: {e}", exc_info=True)
        return jsonify({'message': 'Failed to create pending item'}), 500


def update_pending_item(item_id):
    """Partial update, typically toggling ``completed``."""
    data, error = parse_payload(PendingItemUpdate, request.get_json(silent=True) or {}, partial=True)
    if error:
        return error

    try:
        item = get_storage().update_pending_item(item_id, data)
        if not item:
            return jsonify({'message': 'Pending item not found'}), 404
        return jsonify(item.to_dict()), 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating pending item {item_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to update pending item'}), 500


def delete_pending_item(item_id):
    try:
        if not get_storage().delete_pending_item(item_id):
            return jsonify({'message': 'Pending item not found'}), 404
        return '', 204
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting pending item {item_id}: {e}", exc_info=True)
        return jsonify({'message': 'Failed to delete pending item'}), 500
