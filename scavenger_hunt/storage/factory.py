import logging
import os

from scavenger_hunt.storage.interface import KeyValueStore
from scavenger_hunt.storage.memory import MemoryStore
from scavenger_hunt.storage.postgres_store import PostgresStore
from scavenger_hunt.storage.sqlite_store import DB_PATH, SqliteStore
from scavenger_hunt.utils.env import store_backend

logger = logging.getLogger(__name__)


def store_from_env() -> KeyValueStore:
    '''Build the store selected by SCAVENGER_STORE.'''
    backend = store_backend()
    logger.info(f'Using {backend} progress store')
    if backend == 'memory':
        return MemoryStore()
    if backend == 'postgres':
        return PostgresStore(os.getenv('DATABASE_URL'))
    return SqliteStore(os.getenv('SCAVENGER_DB_PATH') or DB_PATH)
