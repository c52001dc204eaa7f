"""Medical record endpoints and the recent-update side effect."""


class TestCreate:

    def test_ana_scenario(self, client):
        response = client.post('/api/patients', json={'name': 'Ana', 'birthDate': '2008-07-10'})
        assert response.status_code == 201
        patient_id = response.get_json()['id']
        assert patient_id

        response = client.post('/api/medical-records', json={
            'patientId': patient_id, 'type': 'exam', 'date': '2025-01-01',
        })
        assert response.status_code == 201

        updates = client.get('/api/recent-updates').get_json()
        assert updates[0]['patientName'] == 'Ana'
        assert updates[0]['description'] == 'New record added: exam'
        assert updates[0]['icon'] == '📋'

    def test_record_creation_appends_exactly_one_update(self, client, create_patient, create_record):
        patient = create_patient(name='Maria')
        before = client.get('/api/recent-updates').get_json()

        create_record(patient['id'], type='medication', medicationName='Losartana')

        after = client.get('/api/recent-updates').get_json()
        assert len(after) == len(before) + 1
        assert after[0]['patientName'] == 'Maria'
        assert after[0]['patientId'] == patient['id']
        assert 'medication' in after[0]['description']
        assert after[0]['icon'] == '💊'

    def test_record_for_unknown_patient_skips_feed(self, client):
        response = client.post('/api/medical-records', json={
            'patientId': 'ghost', 'type': 'incident', 'date': '2025-01-01',
        })
        assert response.status_code == 201
        assert client.get('/api/recent-updates').get_json() == []

    def test_only_variant_fields_are_kept(self, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'], type='exam', examType='Laboratorial',
                               medicationName='should be dropped')
        assert record['examType'] == 'Laboratorial'
        assert 'medicationName' not in record
        assert record['attachments'] == []

    def test_appointment_variant_fields(self, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'], type='appointment', time='14:30', doctor='Dr. Cardoso',
                               specialty='Cardiologia', clinicHospital='Hospital São Lucas')
        assert record['time'] == '14:30'
        assert record['clinicHospital'] == 'Hospital São Lucas'
        assert set(record) >= {'address', 'mapUrl'}

    def test_unknown_type_is_rejected(self, client, create_patient):
        patient = create_patient()
        response = client.post('/api/medical-records', json={
            'patientId': patient['id'], 'type': 'surgery', 'date': '2025-01-01',
        })
        assert response.status_code == 400
        assert client.get('/api/medical-records').get_json() == []

    def test_missing_date_is_rejected(self, client, create_patient):
        patient = create_patient()
        response = client.post('/api/medical-records', json={'patientId': patient['id'], 'type': 'exam'})
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid data'

    def test_invalid_usage_type_is_rejected(self, client, create_patient):
        patient = create_patient()
        response = client.post('/api/medical-records', json={
            'patientId': patient['id'], 'type': 'medication', 'date': '2025-01-01', 'usageType': 'forever',
        })
        assert response.status_code == 400

    def test_attachments_are_kept(self, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'], attachments=['/uploads/file-1-000000001.pdf'])
        assert record['attachments'] == ['/uploads/file-1-000000001.pdf']


class TestQuery:

    def test_filters_by_patient_and_type(self, client, create_patient, create_record):
        ana = create_patient(name='Ana')
        pedro = create_patient(name='Pedro')
        exam = create_record(ana['id'], type='exam')
        create_record(ana['id'], type='history')
        create_record(pedro['id'], type='exam')

        by_patient = client.get(f"/api/medical-records?patientId={ana['id']}").get_json()
        assert len(by_patient) == 2
        assert {r['patientId'] for r in by_patient} == {ana['id']}

        by_both = client.get(f"/api/medical-records?patientId={ana['id']}&type=exam").get_json()
        assert [r['id'] for r in by_both] == [exam['id']]

        assert len(client.get('/api/medical-records?type=exam').get_json()) == 2

    def test_get_unknown_record_is_404(self, client):
        response = client.get('/api/medical-records/nope')
        assert response.status_code == 404
        assert response.get_json() == {'message': 'Medical record not found'}


class TestUpdateAndDelete:

    def test_partial_update_keeps_other_fields(self, client, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'], examType='Laboratorial', observations='ok')

        response = client.put(f"/api/medical-records/{record['id']}", json={'observations': 'revisar'})
        assert response.status_code == 200
        updated = response.get_json()
        assert updated['observations'] == 'revisar'
        assert updated['examType'] == 'Laboratorial'
        assert updated['title'] == record['title']

    def test_update_accepts_snake_case_keys(self, client, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'], examType='Laboratorial')

        response = client.put(f"/api/medical-records/{record['id']}",
                              json={'exam_type': 'Imagem', 'requesting_doctor': 'Dra. Costa'})
        assert response.status_code == 200
        updated = response.get_json()
        assert updated['examType'] == 'Imagem'
        assert updated['requestingDoctor'] == 'Dra. Costa'
        assert client.get(f"/api/medical-records/{record['id']}").get_json()['examType'] == 'Imagem'

    def test_type_change_drops_previous_variant_fields(self, client, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'], type='credential', serviceName='Portal', password='senha123')

        response = client.put(f"/api/medical-records/{record['id']}", json={'type': 'pending', 'deadline': '2025-02-01'})
        assert response.status_code == 200
        updated = response.get_json()
        assert updated['type'] == 'pending'
        assert updated['deadline'] == '2025-02-01'
        assert 'serviceName' not in updated

        # Switching back does not resurrect the old values
        back = client.put(f"/api/medical-records/{record['id']}", json={'type': 'credential'}).get_json()
        assert back['serviceName'] is None
        assert back['password'] is None

    def test_update_with_invalid_result_is_rejected(self, client, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'])
        response = client.put(f"/api/medical-records/{record['id']}", json={'type': 'bogus'})
        assert response.status_code == 400
        assert client.get(f"/api/medical-records/{record['id']}").get_json()['type'] == 'exam'

    def test_update_unknown_record_is_404(self, client):
        assert client.put('/api/medical-records/nope', json={'title': 'x'}).status_code == 404

    def test_delete(self, client, create_patient, create_record):
        patient = create_patient()
        record = create_record(patient['id'])
        assert client.delete(f"/api/medical-records/{record['id']}").status_code == 204
        assert client.get(f"/api/medical-records/{record['id']}").status_code == 404
        assert client.delete(f"/api/medical-records/{record['id']}").status_code == 404
