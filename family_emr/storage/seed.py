"""Sample household used for demos and local development."""
from family_emr.schemas.medical_record_schemas import medical_record_adapter, to_record_fields
from family_emr.schemas.patient_schemas import PatientCreate

DEMO_FAMILY = [
    {
        'name': 'João Silva', 'birthDate': '1979-01-15', 'bloodType': 'O+', 'doctor': 'Dr. Santos',
        'allergies': ['Penicilina', 'Amendoim'], 'photoUrl': '👨',
        'emergencyContactName': 'Maria Silva', 'emergencyContactPhone': '(11) 99999-8888',
        'insurancePlan': 'Unimed', 'insuranceNumber': '123456789',
    },
    {
        'name': 'Maria Silva', 'birthDate': '1982-03-22', 'bloodType': 'A+', 'doctor': 'Dra. Costa',
        'allergies': ['Aspirina'], 'photoUrl': '👩',
        'emergencyContactName': 'João Silva', 'emergencyContactPhone': '(11) 99999-7777',
        'insurancePlan': 'Unimed', 'insuranceNumber': '987654321',
    },
    {
        'name': 'Ana Silva', 'birthDate': '2008-07-10', 'bloodType': 'B+', 'doctor': 'Dr. Oliveira',
        'allergies': [], 'photoUrl': '👧',
        'emergencyContactName': 'João Silva', 'emergencyContactPhone': '(11) 99999-7777',
        'insurancePlan': 'Unimed', 'insuranceNumber': '456789123',
    },
    {
        'name': 'Pedro Silva', 'birthDate': '2012-11-05', 'bloodType': 'O+', 'doctor': 'Dr. Lima',
        'allergies': ['Pólen'], 'photoUrl': '👦',
        'emergencyContactName': 'Maria Silva', 'emergencyContactPhone': '(11) 99999-8888',
        'insurancePlan': 'Unimed', 'insuranceNumber': '789123456',
    },
]

# Keyed by index into DEMO_FAMILY
DEMO_RECORDS = [
    (0, {'type': 'exam', 'title': 'Exame de Sangue Completo', 'date': '2024-01-15',
         'description': 'Hemograma completo com contagem de plaquetas',
         'examType': 'Laboratorial', 'requestingDoctor': 'Dr. Santos',
         'observations': 'Valores dentro da normalidade'}),
    (0, {'type': 'medication', 'title': 'Losartana 50mg', 'date': '2024-01-10',
         'description': 'Para controle da pressão arterial', 'medicationName': 'Losartana',
         'frequency': '1x ao dia', 'usageType': 'continuous', 'periodOfDay': 'morning',
         'prescribingDoctor': 'Dr. Santos', 'indication': 'Hipertensão arterial'}),
    (0, {'type': 'appointment', 'title': 'Consulta Cardiológica', 'date': '2024-02-15',
         'description': 'Avaliação cardiovascular de rotina', 'time': '14:30',
         'doctor': 'Dr. Cardoso', 'specialty': 'Cardiologia',
         'clinicHospital': 'Hospital São Lucas', 'address': 'Rua das Flores, 123'}),
    (0, {'type': 'history', 'title': 'Cirurgia de Apendicite', 'date': '2020-08-15',
         'description': 'Apendicectomia realizada sem complicações'}),
    (0, {'type': 'incident', 'title': 'Queda em Casa', 'date': '2024-01-25',
         'description': 'Queda no banheiro, sem fraturas'}),
    (0, {'type': 'credential', 'title': 'Portal do Paciente', 'date': '2024-01-05',
         'description': 'Acesso ao portal online do hospital', 'serviceName': 'Portal São Lucas',
         'serviceUrl': 'https://portal.saolucas.com.br', 'username': 'joao.silva',
         'password': 'senha123', 'additionalNotes': 'Primeiro acesso requer troca de senha'}),
    (1, {'type': 'exam', 'title': 'Mamografia', 'date': '2024-01-12',
         'description': 'Exame preventivo de mama', 'examType': 'Imagem',
         'requestingDoctor': 'Dra. Costa', 'observations': 'Resultado normal'}),
    (1, {'type': 'medication', 'title': 'Vitamina D3', 'date': '2024-01-08',
         'description': 'Suplementação vitamínica', 'medicationName': 'Colecalciferol',
         'frequency': '1x por semana', 'usageType': 'temporary', 'periodOfDay': 'morning',
         'duration': '3 meses', 'prescribingDoctor': 'Dra. Costa',
         'indication': 'Deficiência de vitamina D'}),
    (1, {'type': 'history', 'title': 'Parto Normal', 'date': '2008-07-10',
         'description': 'Parto normal da filha Ana, sem complicações'}),
    (2, {'type': 'exam', 'title': 'Exame Oftalmológico', 'date': '2024-01-22',
         'description': 'Avaliação da visão e saúde ocular', 'examType': 'Clínico',
         'requestingDoctor': 'Dr. Oliveira', 'observations': 'Visão normal para a idade'}),
    (2, {'type': 'appointment', 'title': 'Consulta Pediátrica', 'date': '2024-03-10',
         'description': 'Acompanhamento do crescimento', 'time': '15:00',
         'doctor': 'Dr. Oliveira', 'specialty': 'Pediatria',
         'clinicHospital': 'Clínica Infantil', 'address': 'Rua das Crianças, 789'}),
    (3, {'type': 'exam', 'title': 'Teste Alérgico', 'date': '2024-01-14',
         'description': 'Teste cutâneo para identificação de alérgenos', 'examType': 'Clínico',
         'requestingDoctor': 'Dr. Lima', 'observations': 'Positivo para pólen de gramíneas'}),
    (3, {'type': 'medication', 'title': 'Antialérgico Infantil', 'date': '2024-01-16',
         'description': 'Controle dos sintomas alérgicos', 'medicationName': 'Loratadina',
         'frequency': '1x ao dia', 'usageType': 'continuous', 'periodOfDay': 'evening',
         'prescribingDoctor': 'Dr. Lima', 'indication': 'Rinite alérgica'}),
]


def seed_demo_data(storage):
    """Load the sample household into ``storage``. Returns the created patients.

    Seeding goes through the same payload schemas as the API, so demo data
    obeys the same rules as user data. No recent updates are generated.
    """
    patients = [
        storage.create_patient(PatientCreate.model_validate(member).model_dump())
        for member in DEMO_FAMILY
    ]
    for index, record in DEMO_RECORDS:
        payload = medical_record_adapter.validate_python({**record, 'patientId': patients[index].id})
        storage.create_medical_record(to_record_fields(payload))
    return patients
