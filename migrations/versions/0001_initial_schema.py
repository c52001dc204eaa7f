"""initial schema: patients, appointments, medical records, pending items, recent updates

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _existing_tables():
    return set(sa.inspect(op.get_bind()).get_table_names())


def upgrade():
    # Tables may already exist when the app created them on startup
    existing = _existing_tables()

    if 'patients' not in existing:
        op.create_table(
            'patients',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('birth_date', sa.String(length=32), nullable=False),
            sa.Column('blood_type', sa.String(length=3), nullable=True),
            sa.Column('doctor', sa.String(length=255), nullable=True),
            sa.Column('allergies', sa.JSON(), nullable=True),
            sa.Column('photo_url', sa.String(length=1024), nullable=True),
            sa.Column('emergency_contact_name', sa.String(length=255), nullable=True),
            sa.Column('emergency_contact_phone', sa.String(length=64), nullable=True),
            sa.Column('insurance_plan', sa.String(length=255), nullable=True),
            sa.Column('insurance_number', sa.String(length=128), nullable=True),
            sa.Column('insurance_card_front_url', sa.String(length=1024), nullable=True),
            sa.Column('insurance_card_back_url', sa.String(length=1024), nullable=True),
            sa.Column('id_card_front_url', sa.String(length=1024), nullable=True),
            sa.Column('id_card_back_url', sa.String(length=1024), nullable=True),
            sa.Column('sensitive_data_password_active', sa.Boolean(), nullable=False),
            sa.Column('sensitive_data_password', sa.String(length=255), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )

    if 'appointments' not in existing:
        op.create_table(
            'appointments',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('patient_id', sa.String(length=36), nullable=False),
            sa.Column('patient_name', sa.String(length=255), nullable=False),
            sa.Column('specialty', sa.String(length=255), nullable=False),
            sa.Column('doctor', sa.String(length=255), nullable=False),
            sa.Column('date', sa.String(length=32), nullable=False),
            sa.Column('time', sa.String(length=16), nullable=False),
            sa.Column('location', sa.String(length=1024), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_appointments_patient_id'), 'appointments', ['patient_id'], unique=False)

    if 'medical_records' not in existing:
        op.create_table(
            'medical_records',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('patient_id', sa.String(length=36), nullable=False),
            sa.Column('type', sa.String(length=20), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=True),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('date', sa.String(length=32), nullable=False),
            sa.Column('attachments', sa.JSON(), nullable=True),
            sa.Column('exam_type', sa.String(length=255), nullable=True),
            sa.Column('requesting_doctor', sa.String(length=255), nullable=True),
            sa.Column('observations', sa.Text(), nullable=True),
            sa.Column('medication_name', sa.String(length=255), nullable=True),
            sa.Column('frequency', sa.String(length=255), nullable=True),
            sa.Column('usage_type', sa.String(length=20), nullable=True),
            sa.Column('period_of_day', sa.String(length=50), nullable=True),
            sa.Column('start_date', sa.String(length=32), nullable=True),
            sa.Column('duration', sa.String(length=100), nullable=True),
            sa.Column('prescribing_doctor', sa.String(length=255), nullable=True),
            sa.Column('indication', sa.Text(), nullable=True),
            sa.Column('clinic_hospital', sa.String(length=255), nullable=True),
            sa.Column('doctor', sa.String(length=255), nullable=True),
            sa.Column('specialty', sa.String(length=255), nullable=True),
            sa.Column('address', sa.String(length=1024), nullable=True),
            sa.Column('map_url', sa.String(length=1024), nullable=True),
            sa.Column('time', sa.String(length=16), nullable=True),
            sa.Column('deadline', sa.String(length=32), nullable=True),
            sa.Column('service_name', sa.String(length=255), nullable=True),
            sa.Column('service_url', sa.String(length=1024), nullable=True),
            sa.Column('username', sa.String(length=255), nullable=True),
            sa.Column('password', sa.String(length=255), nullable=True),
            sa.Column('additional_notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_medical_records_patient_id'), 'medical_records', ['patient_id'], unique=False)
        op.create_index(op.f('ix_medical_records_type'), 'medical_records', ['type'], unique=False)

    if 'pending_items' not in existing:
        op.create_table(
            'pending_items',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('patient_id', sa.String(length=36), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('priority', sa.String(length=10), nullable=True),
            sa.Column('completed', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_pending_items_patient_id'), 'pending_items', ['patient_id'], unique=False)

    if 'recent_updates' not in existing:
        op.create_table(
            'recent_updates',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('patient_id', sa.String(length=36), nullable=False),
            sa.Column('patient_name', sa.String(length=255), nullable=False),
            sa.Column('description', sa.String(length=512), nullable=False),
            sa.Column('icon', sa.String(length=16), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_recent_updates_patient_id'), 'recent_updates', ['patient_id'], unique=False)
        op.create_index(op.f('ix_recent_updates_created_at'), 'recent_updates', ['created_at'], unique=False)


def downgrade():
    for table in ('recent_updates', 'pending_items', 'medical_records', 'appointments', 'patients'):
        op.drop_table(table)
