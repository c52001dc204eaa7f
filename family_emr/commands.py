import click
from flask.cli import with_appcontext
from family_emr.extensions import db
from family_emr.services.dashboard import dashboard_summary
from family_emr.storage import get_storage, seed_demo_data
from family_emr.utils.access_gate import SensitiveAccessGate
from family_emr.services.activity import RECORD_TYPE_ICONS, DEFAULT_RECORD_ICON


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the database tables."""
    db.create_all()
    click.echo("Database initialized successfully!")


@click.command('seed-demo')
@with_appcontext
def seed_demo_command():
    """Load the demo household into the configured store."""
    storage = get_storage()
    if storage.get_patients():
        click.echo("Store already has patients, skipping demo data.")
        return
    seed_demo_data(storage)
    click.echo(f"Loaded {len(storage.get_patients())} patients and "
               f"{len(storage.get_medical_records())} medical records.")


@click.command('dashboard')
@with_appcontext
def dashboard_command():
    """Print the household overview."""
    summary = dashboard_summary(get_storage())

    click.echo(f"Patients: {summary['patientCount']}")

    click.echo("\nUpcoming appointments:")
    if not summary['upcomingAppointments']:
        click.echo("  none")
    for item in summary['upcomingAppointments']:
        when = f"{item['date']} {item['time'] or ''}".strip()
        click.echo(f"  {when}  {item['patientName']}  {item['specialty'] or ''} {item['doctor'] or ''}".rstrip())

    click.echo("\nPending items:")
    if not summary['pendingItems']:
        click.echo("  none")
    for item in summary['pendingItems']:
        click.echo(f"  [{item['priority']}] {item['title']}")

    click.echo("\nRecent updates:")
    for update in summary['recentUpdates']:
        click.echo(f"  {update['icon']} {update['patientName']}: {update['description']}")


@click.command('records')
@click.argument('patient_id')
@with_appcontext
def records_command(patient_id):
    """List a patient's medical records, hiding sensitive ones until unlocked."""
    storage = get_storage()
    patient = storage.get_patient(patient_id)
    if not patient:
        raise click.ClickException('Patient not found')

    records = storage.get_medical_records_by_patient(patient_id)
    gate = SensitiveAccessGate(patient)
    if gate.is_locked and gate.hidden_count(records):
        password = click.prompt('Sensitive data password', hide_input=True, default='', show_default=False)
        if not gate.unlock(password):
            click.echo('Incorrect password, sensitive records stay hidden.')

    visible = gate.filter_records(records)
    click.echo(f"{patient.name}: {len(visible)} record(s)")
    for record in visible:
        icon = RECORD_TYPE_ICONS.get(record.type, DEFAULT_RECORD_ICON)
        click.echo(f"  {icon} {record.date}  {record.title}  ({record.type})")

    hidden = gate.hidden_count(records)
    if hidden:
        click.echo(f"{hidden} sensitive record(s) hidden")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_command)
    app.cli.add_command(dashboard_command)
    app.cli.add_command(records_command)
