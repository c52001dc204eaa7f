from flask import current_app
from . import api_bp, files_bp
from family_emr.extensions import limiter
from family_emr.utils.decorators import audit_log
from .controllers import patient_controller, appointment_controller, medical_record_controller
from .controllers import pending_item_controller, dashboard_controller, upload_controller


# --- Patient Endpoints ---
@api_bp.route('/patients', methods=['GET'])
def get_patients():
    return patient_controller.get_all_patients()

@api_bp.route('/patients/<patient_id>', methods=['GET'])
def get_patient(patient_id):
    return patient_controller.get_patient_by_id(patient_id)

@api_bp.route('/patients', methods=['POST'])
@audit_log("PATIENT_REGISTRATION", "patients")
def register_patient():
    return patient_controller.register_patient()

@api_bp.route('/patients/<patient_id>', methods=['PUT'])
@audit_log("UPDATE_PATIENT", "patients")
def update_patient(patient_id):
    return patient_controller.update_patient(patient_id)

@api_bp.route('/patients/<patient_id>', methods=['DELETE'])
@audit_log("DELETE_PATIENT", "patients")
def delete_patient(patient_id):
    return patient_controller.delete_patient(patient_id)


# --- Appointment Endpoints ---
@api_bp.route('/appointments', methods=['GET'])
def get_appointments():
    return appointment_controller.get_appointments()

@api_bp.route('/appointments/<appointment_id>', methods=['GET'])
def get_appointment(appointment_id):
    return appointment_controller.get_appointment_by_id(appointment_id)

@api_bp.route('/appointments', methods=['POST'])
@audit_log("CREATE_APPOINTMENT", "appointments")
def create_appointment():
    return appointment_controller.create_appointment()

@api_bp.route('/appointments/<appointment_id>', methods=['PUT'])
@audit_log("UPDATE_APPOINTMENT", "appointments")
def update_appointment(appointment_id):
    return appointment_controller.update_appointment(appointment_id)

@api_bp.route('/appointments/<appointment_id>', methods=['DELETE'])
@audit_log("DELETE_APPOINTMENT", "appointments")
def delete_appointment(appointment_id):
    return appointment_controller.delete_appointment(appointment_id)


# --- Medical Record Endpoints ---
@api_bp.route('/medical-records', methods=['GET'])
def get_medical_records():
    return medical_record_controller.get_medical_records()

@api_bp.route('/medical-records/<record_id>', methods=['GET'])
def get_medical_record(record_id):
    return medical_record_controller.get_medical_record_by_id(record_id)

@api_bp.route('/medical-records', methods=['POST'])
@audit_log("CREATE_MEDICAL_RECORD", "medical_records")
def create_medical_record():
    return medical_record_controller.create_medical_record()

@api_bp.route('/medical-records/<record_id>', methods=['PUT'])
@audit_log("UPDATE_MEDICAL_RECORD", "medical_records")
def update_medical_record(record_id):
    return medical_record_controller.update_medical_record(record_id)

@api_bp.route('/medical-records/<record_id>', methods=['DELETE'])
@audit_log("DELETE_MEDICAL_RECORD", "medical_records")
def delete_medical_record(record_id):
    return medical_record_controller.delete_medical_record(record_id)


# --- Pending Item Endpoints ---
@api_bp.route('/pending-items', methods=['GET'])
def get_pending_items():
    return pending_item_controller.get_pending_items()

@api_bp.route('/pending-items', methods=['POST'])
@audit_log("CREATE_PENDING_ITEM", "pending_items")
def create_pending_item():
    return pending_item_controller.create_pending_item()

@api_bp.route('/pending-items/<item_id>', methods=['PUT'])
@audit_log("UPDATE_PENDING_ITEM", "pending_items")
def update_pending_item(item_id):
    return pending_item_controller.update_pending_item(item_id)

@api_bp.route('/pending-items/<item_id>', methods=['DELETE'])
@audit_log("DELETE_PENDING_ITEM", "pending_items")
def delete_pending_item(item_id):
    return pending_item_controller.delete_pending_item(item_id)


# --- Activity, Dashboard and Search ---
@api_bp.route('/recent-updates', methods=['GET'])
def get_recent_updates():
    return dashboard_controller.get_recent_updates()

@api_bp.route('/dashboard', methods=['GET'])
def get_dashboard():
    return dashboard_controller.get_dashboard()

@api_bp.route('/search', methods=['GET'])
def search():
    return dashboard_controller.search_everything()


# --- Uploads ---
@api_bp.route('/upload', methods=['POST'])
@limiter.limit(lambda: current_app.config['UPLOAD_RATE_LIMIT'])
@audit_log("UPLOAD_FILE", "uploads")
def upload_file():
    return upload_controller.upload_file()

@files_bp.route('/uploads/<path:filename>', methods=['GET'])
def serve_upload(filename):
    return upload_controller.serve_upload(filename)
