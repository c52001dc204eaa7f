from flask import request, jsonify, current_app
from family_emr.services.dashboard import dashboard_summary, search
from family_emr.storage import get_storage


def get_recent_updates():
    """Activity feed, newest first."""
    try:
        updates = get_storage().get_recent_updates()
        return jsonify([update.to_dict() for update in updates]), 200
    except Exception as e:
        current_app.logger.error(f"Error fetching recent updates: {e}", exc_info=True)
        return jsonify({'message': 'Failed to fetch recent updates'}), 500


def get_dashboard():
    try:
        return jsonify(dashboard_summary(get_storage())), 200
    except Exception as e:
        current_app.logger.error(f"Error building dashboard: {e}", exc_info=True)
        return jsonify({'message': 'Failed to load dashboard'}), 500


def search_everything():
    """Searches patients and medical records with ?q=."""
    try:
        results = search(get_storage(), request.args.get('q', ''))
        return jsonify({
            'patients': [patient.to_dict() for patient in results['patients']],
            'records': [record.to_dict() for record in results['records']],
        }), 200
    except Exception as e:
        current_app.logger.error(f"Error searching: {e}", exc_info=True)
        return jsonify({'message': 'Failed to search'}), 500
