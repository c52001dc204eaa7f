"""Standalone appointments, pending items and the activity feed."""
import pytest


@pytest.fixture
def appointment_payload(create_patient):
    patient = create_patient()
    return {
        'patientId': patient['id'], 'patientName': patient['name'], 'specialty': 'Pediatria',
        'doctor': 'Dr. Oliveira', 'date': '2030-03-10', 'time': '15:00', 'location': 'Clínica Infantil',
    }


class TestAppointments:

    def test_create_and_get(self, client, appointment_payload):
        response = client.post('/api/appointments', json=appointment_payload)
        assert response.status_code == 201
        created = response.get_json()
        for key, value in appointment_payload.items():
            assert created[key] == value

        assert client.get(f"/api/appointments/{created['id']}").get_json() == created

    def test_missing_field_is_rejected(self, client, appointment_payload):
        del appointment_payload['location']
        response = client.post('/api/appointments', json=appointment_payload)
        assert response.status_code == 400
        assert response.get_json()['errors'][0]['path'] == ['location']
        assert client.get('/api/appointments').get_json() == []

    def test_filter_by_patient(self, client, appointment_payload, create_patient):
        client.post('/api/appointments', json=appointment_payload)
        other = create_patient(name='Pedro')
        client.post('/api/appointments', json={**appointment_payload, 'patientId': other['id'], 'patientName': 'Pedro'})

        listed = client.get(f"/api/appointments?patientId={other['id']}").get_json()
        assert [a['patientName'] for a in listed] == ['Pedro']
        assert len(client.get('/api/appointments').get_json()) == 2

    def test_partial_update_and_delete(self, client, appointment_payload):
        created = client.post('/api/appointments', json=appointment_payload).get_json()

        updated = client.put(f"/api/appointments/{created['id']}", json={'time': '16:30'}).get_json()
        assert updated['time'] == '16:30'
        assert updated['doctor'] == created['doctor']

        assert client.delete(f"/api/appointments/{created['id']}").status_code == 204
        assert client.get(f"/api/appointments/{created['id']}").status_code == 404

    def test_unknown_appointment(self, client):
        assert client.get('/api/appointments/nope').get_json() == {'message': 'Appointment not found'}
        assert client.put('/api/appointments/nope', json={'time': '10:00'}).status_code == 404
        assert client.delete('/api/appointments/nope').status_code == 404


class TestPendingItems:

    def test_create_with_defaults(self, client, create_patient):
        patient = create_patient()
        response = client.post('/api/pending-items', json={'patientId': patient['id'], 'title': 'Renovar receita'})
        assert response.status_code == 201
        item = response.get_json()
        assert item['priority'] == 'medium'
        assert item['completed'] is False
        assert item['description'] is None

    def test_invalid_priority_is_rejected(self, client, create_patient):
        patient = create_patient()
        response = client.post('/api/pending-items', json={
            'patientId': patient['id'], 'title': 'Vacina', 'priority': 'urgent',
        })
        assert response.status_code == 400

    def test_toggle_completed(self, client, create_patient):
        patient = create_patient()
        item = client.post('/api/pending-items', json={
            'patientId': patient['id'], 'title': 'Vacina', 'priority': 'high',
        }).get_json()

        updated = client.put(f"/api/pending-items/{item['id']}", json={'completed': True}).get_json()
        assert updated['completed'] is True
        assert updated['priority'] == 'high'

    def test_filter_and_delete(self, client, create_patient):
        ana = create_patient(name='Ana')
        pedro = create_patient(name='Pedro')
        item = client.post('/api/pending-items', json={'patientId': ana['id'], 'title': 'Exame'}).get_json()
        client.post('/api/pending-items', json={'patientId': pedro['id'], 'title': 'Vacina'})

        listed = client.get(f"/api/pending-items?patientId={ana['id']}").get_json()
        assert [i['id'] for i in listed] == [item['id']]

        assert client.delete(f"/api/pending-items/{item['id']}").status_code == 204
        assert client.delete(f"/api/pending-items/{item['id']}").status_code == 404


class TestRecentUpdates:

    def test_patient_registration_is_logged(self, client, create_patient):
        patient = create_patient(name='Maria')
        updates = client.get('/api/recent-updates').get_json()
        assert len(updates) == 1
        assert updates[0]['patientId'] == patient['id']
        assert updates[0]['description'] == 'New patient registered'
        assert updates[0]['icon'] == '👤'

    def test_newest_first(self, client, create_patient, create_record):
        ana = create_patient(name='Ana')
        create_patient(name='Pedro')
        create_record(ana['id'], type='credential')

        updates = client.get('/api/recent-updates').get_json()
        assert [u['patientName'] for u in updates] == ['Ana', 'Pedro', 'Ana']
        assert updates[0]['icon'] == '🔑'

    def test_appointments_and_pending_items_do_not_touch_feed(self, client, appointment_payload):
        before = client.get('/api/recent-updates').get_json()
        client.post('/api/appointments', json=appointment_payload)
        client.post('/api/pending-items', json={'patientId': appointment_payload['patientId'], 'title': 'x'})
        assert client.get('/api/recent-updates').get_json() == before
