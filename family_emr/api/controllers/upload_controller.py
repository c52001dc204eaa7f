from flask import request, jsonify, current_app, send_from_directory
from family_emr.utils.upload_util import upload_manager, UploadRejected


def upload_file():
    """Stores the single file sent under the 'file' field."""
    if 'file' not in request.files:
        return jsonify({'message': 'No file provided'}), 400

    file = request.files['file']
    if file.filename == '':
        return jsonify({'message': 'No file selected'}), 400

    try:
        result = upload_manager.save(file)
    except UploadRejected as e:
        current_app.logger.info(f"Upload rejected for '{file.filename}': {e.message}")
        return jsonify({'message': e.message}), e.status_code
    except Exception as e:
        current_app.logger.error(f"Error storing upload '{file.filename}': {e}", exc_info=True)
        return jsonify({'message': 'Failed to upload file'}), 500

    return jsonify(result), 200


def serve_upload(filename):
    # send_from_directory answers 404 for missing files and unsafe paths
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
