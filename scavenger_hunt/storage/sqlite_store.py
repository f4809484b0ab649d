import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional

from scavenger_hunt.errors import StoreError

logger = logging.getLogger(__name__)

DB_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), 'data', 'scavenger_hunt.db'
)


class SqliteStore:
    '''Key-value store kept in one SQLite table'''

    def __init__(self, db_path: str = DB_PATH):
        self.db_path = db_path
        self._schema_ready = False

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _run(self, query: str, params: Iterable[Any] = ()) -> list[tuple]:
        if not self._schema_ready:
            self.init_schema()
        try:
            with self._connect() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except sqlite3.Error as e:
            logger.error(f'SQLite error: {e}\nQuery: {query}')
            raise StoreError(f'SQLite store at {self.db_path} failed: {e}') from e

    def init_schema(self) -> None:
        '''Create the kv_store table if it doesn't already exist.'''
        directory = os.path.dirname(self.db_path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with self._connect() as conn:
                conn.execute(
                    '''
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value BLOB NOT NULL,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                    '''
                )
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f'Could not initialise {self.db_path}: {e}') from e
        self._schema_ready = True
        logger.debug(f'kv_store table ready in {self.db_path}')

    def get(self, key: str) -> Optional[bytes]:
        rows = self._run('SELECT value FROM kv_store WHERE key = ?', (key,))
        return bytes(rows[0][0]) if rows else None

    def set(self, key: str, value: bytes) -> None:
        self._run(
            '''
            INSERT INTO kv_store (key, value) VALUES (?, ?)
            ON CONFLICT (key) DO UPDATE
            SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
            ''',
            (key, sqlite3.Binary(value)),
        )

    def delete(self, key: str) -> None:
        self._run('DELETE FROM kv_store WHERE key = ?', (key,))
