from flask import current_app
from family_emr.extensions import db
from family_emr.storage.base import Storage
from family_emr.storage.memory import MemStorage
from family_emr.storage.database import DatabaseStorage
from family_emr.storage.seed import seed_demo_data

BACKENDS = {
    'memory': MemStorage,
    'database': DatabaseStorage,
}


def init_storage(app):
    """Bind the configured record store to ``app``."""
    backend = app.config['STORAGE_BACKEND']
    if backend not in BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND '{backend}', expected one of {sorted(BACKENDS)}")

    storage = BACKENDS[backend]()
    app.extensions['storage'] = storage

    with app.app_context():
        if backend == 'database':
            db.create_all()
        if app.config['SEED_DEMO_DATA'] and not storage.get_patients():
            seed_demo_data(storage)
            app.logger.info('Loaded demo household into the %s store', backend)

    return storage


def get_storage() -> Storage:
    return current_app.extensions['storage']


__all__ = ['Storage', 'MemStorage', 'DatabaseStorage', 'init_storage', 'get_storage', 'seed_demo_data']
