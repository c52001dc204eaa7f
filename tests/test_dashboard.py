"""Dashboard view model, search and the two appointment sources."""
from datetime import datetime

from family_emr.services.dashboard import (
    parse_schedule, upcoming_appointments, open_pending_items, dashboard_summary,
    SOURCE_APPOINTMENT, SOURCE_MEDICAL_RECORD, SOURCE_PENDING_ITEM,
)

NOW = datetime(2025, 1, 1, 12, 0)


def test_parse_schedule_formats():
    assert parse_schedule('2025-02-15', '14:30') == datetime(2025, 2, 15, 14, 30)
    assert parse_schedule('15/02/2025') == datetime(2025, 2, 15)
    assert parse_schedule('2025-02-15') == datetime(2025, 2, 15)
    assert parse_schedule('2025-02-15', 'tarde') is None
    assert parse_schedule('next week') is None
    assert parse_schedule('') is None


def test_upcoming_merges_both_sources(app, client, create_patient, create_record):
    ana = create_patient(name='Ana')
    client.post('/api/appointments', json={
        'patientId': ana['id'], 'patientName': 'Ana', 'specialty': 'Pediatria', 'doctor': 'Dr. Oliveira',
        'date': '2025-03-10', 'time': '15:00', 'location': 'Clínica Infantil',
    })
    create_record(ana['id'], type='appointment', date='2025-02-15', time='14:30',
                  specialty='Cardiologia', clinicHospital='Hospital São Lucas')
    # Past visits drop out
    create_record(ana['id'], type='appointment', date='2024-02-15', time='14:30')

    with app.app_context():
        upcoming = upcoming_appointments(app.extensions['storage'], now=NOW)

    assert [item['source'] for item in upcoming] == [SOURCE_MEDICAL_RECORD, SOURCE_APPOINTMENT]
    assert upcoming[0]['patientName'] == 'Ana'
    assert upcoming[0]['location'] == 'Hospital São Lucas'


def test_upcoming_keeps_undated_after_dated(app, client, create_patient, create_record):
    ana = create_patient(name='Ana')
    create_record(ana['id'], type='appointment', date='a definir')
    create_record(ana['id'], type='appointment', date='20/01/2025')

    with app.app_context():
        upcoming = upcoming_appointments(app.extensions['storage'], now=NOW)

    assert [item['date'] for item in upcoming] == ['20/01/2025', 'a definir']


def test_upcoming_skips_valid_date_with_unreadable_time(app, create_patient, create_record):
    ana = create_patient(name='Ana')
    create_record(ana['id'], type='appointment', date='2025-02-15', time='tarde', title='Sem horário')
    create_record(ana['id'], type='appointment', date='2025-02-16', time='09:00', title='Com horário')

    with app.app_context():
        upcoming = upcoming_appointments(app.extensions['storage'], now=NOW)

    assert [item['date'] for item in upcoming] == ['2025-02-16']


def test_open_pending_items(app, client, create_patient, create_record):
    ana = create_patient(name='Ana')
    done = client.post('/api/pending-items', json={'patientId': ana['id'], 'title': 'Feito'}).get_json()
    client.put(f"/api/pending-items/{done['id']}", json={'completed': True})
    client.post('/api/pending-items', json={'patientId': ana['id'], 'title': 'Vacina', 'priority': 'high'})
    create_record(ana['id'], type='pending', title='Levar exames', deadline='2025-02-01')

    with app.app_context():
        items = open_pending_items(app.extensions['storage'])

    assert [(item['title'], item['source']) for item in items] == [
        ('Vacina', SOURCE_PENDING_ITEM),
        ('Levar exames', SOURCE_MEDICAL_RECORD),
    ]
    assert items[1]['priority'] == 'medium'


def test_dashboard_summary_limits_recent_updates(app, create_patient):
    for i in range(7):
        create_patient(name=f'Paciente {i}')

    with app.app_context():
        summary = dashboard_summary(app.extensions['storage'], now=NOW)

    assert summary['patientCount'] == 7
    assert len(summary['recentUpdates']) == 5
    assert summary['recentUpdates'][0]['patientName'] == 'Paciente 6'


def test_dashboard_endpoint(client, create_patient):
    create_patient()
    response = client.get('/api/dashboard')
    assert response.status_code == 200
    body = response.get_json()
    assert set(body) == {'patientCount', 'upcomingAppointments', 'pendingItems', 'recentUpdates'}
    assert body['patientCount'] == 1


class TestSearch:

    def test_matches_patients_and_records(self, client, create_patient, create_record):
        joao = create_patient(name='João Silva', doctor='Dr. Santos', allergies=['Penicilina'])
        create_patient(name='Pedro')
        create_record(joao['id'], type='medication', title='Losartana 50mg')

        body = client.get('/api/search?q=penicil').get_json()
        assert [p['name'] for p in body['patients']] == ['João Silva']
        assert body['records'] == []

        body = client.get('/api/search?q=LOSARTANA').get_json()
        assert [r['title'] for r in body['records']] == ['Losartana 50mg']

    def test_records_match_owner_name(self, client, create_patient, create_record):
        ana = create_patient(name='Ana')
        create_record(ana['id'], title='Raio X')
        body = client.get('/api/search?q=ana').get_json()
        assert [r['title'] for r in body['records']] == ['Raio X']

    def test_empty_term(self, client, create_patient):
        create_patient()
        assert client.get('/api/search?q=').get_json() == {'patients': [], 'records': []}
        assert client.get('/api/search').get_json() == {'patients': [], 'records': []}


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok', 'storage': 'memory'}


def test_unknown_route_is_json_404(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json() == {'message': 'Resource not found'}
