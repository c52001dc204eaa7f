"""Flask CLI commands."""
import pytest


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def protected_patient(create_patient, create_record):
    patient = create_patient(name='João', sensitiveDataPasswordActive=True, sensitiveDataPassword='1234')
    create_record(patient['id'], type='exam', title='Hemograma')
    create_record(patient['id'], type='credential', title='Portal do Paciente')
    create_record(patient['id'], type='medication', title='Losartana')
    return patient


def test_seed_demo(runner, storage):
    result = runner.invoke(args=['seed-demo'])
    assert result.exit_code == 0
    assert 'Loaded 4 patients' in result.output
    assert len(storage.get_patients()) == 4

    again = runner.invoke(args=['seed-demo'])
    assert 'skipping' in again.output
    assert len(storage.get_patients()) == 4


def test_init_db(db_app):
    result = db_app.test_cli_runner().invoke(args=['init-db'])
    assert result.exit_code == 0
    assert 'initialized' in result.output


def test_dashboard(runner, create_patient):
    create_patient(name='Maria')
    result = runner.invoke(args=['dashboard'])
    assert result.exit_code == 0
    assert 'Patients: 1' in result.output
    assert 'Maria: New patient registered' in result.output


def test_records_with_correct_password(runner, protected_patient):
    result = runner.invoke(args=['records', protected_patient['id']], input='1234\n')
    assert result.exit_code == 0
    assert 'Hemograma' in result.output
    assert 'Portal do Paciente' in result.output
    assert 'hidden' not in result.output


def test_records_with_wrong_password(runner, protected_patient):
    result = runner.invoke(args=['records', protected_patient['id']], input='0000\n')
    assert result.exit_code == 0
    assert 'Incorrect password' in result.output
    assert 'Losartana' in result.output
    assert 'Hemograma' not in result.output
    assert 'Portal do Paciente' not in result.output
    assert '2 sensitive record(s) hidden' in result.output


def test_records_unknown_patient(runner):
    result = runner.invoke(args=['records', 'nope'])
    assert result.exit_code != 0
    assert 'Patient not found' in result.output
