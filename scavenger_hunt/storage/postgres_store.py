import logging
import os
from typing import Any, Callable, Iterable, Optional, TypeVar

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from scavenger_hunt.errors import StoreError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class PostgresStore:
    '''Key-value store kept in one Postgres table'''

    # Shared pool across the process, keyed by conninfo
    _pools: dict[str, ConnectionPool] = {}

    def __init__(
        self,
        conninfo: Optional[str] = None,
        min_size: int = 1,
        max_size: int = 4,
    ) -> None:
        conninfo = conninfo or os.getenv('DATABASE_URL')
        if not conninfo:
            raise StoreError('DATABASE_URL is not set; cannot use the Postgres store')
        self.conninfo = conninfo
        self.min_size = min_size
        self.max_size = max_size
        self._schema_ready = False

    @property
    def pool(self) -> ConnectionPool:
        pool = self.__class__._pools.get(self.conninfo)
        if pool is None:
            pool = ConnectionPool(
                conninfo=self.conninfo,
                min_size=self.min_size,
                max_size=self.max_size,
                kwargs={'row_factory': dict_row},
                open=True,
            )
            self.__class__._pools[self.conninfo] = pool
            logger.info('Initialized Postgres connection pool')
        return pool

    @classmethod
    def close_pools(cls) -> None:
        '''Close every pool opened by this process.'''
        pools, cls._pools = cls._pools, {}
        for pool in pools.values():
            pool.close()

    def _run_with_retry(self, fn: Callable[[psycopg.Connection], T]) -> T:
        '''Run fn on a pooled connection; retry once on connection errors.'''

        def _attempt() -> T:
            with self.pool.connection() as conn:
                return fn(conn)

        try:
            try:
                return _attempt()
            except (psycopg.OperationalError, psycopg.InterfaceError) as e:
                logger.warning(
                    f'Store operation failed due to connection issue: {e}. '
                    f'Retrying once...'
                )
                self.pool.check()
                return _attempt()
        except psycopg.Error as e:
            logger.error(f'Postgres store error: {e}')
            raise StoreError(f'Postgres store failed: {e}') from e

    def _execute(self, query: str, params: Iterable[Any]) -> list[dict[str, Any]]:
        if not self._schema_ready:
            self.init_schema()

        def _do(conn: psycopg.Connection) -> list[dict[str, Any]]:
            with conn.cursor() as cur:
                cur.execute(query, tuple(params))
                return cur.fetchall() if cur.description else []

        return self._run_with_retry(_do)

    def init_schema(self) -> None:
        '''Create the kv_store table if it doesn't already exist.'''

        def _do(conn: psycopg.Connection) -> None:
            conn.execute(
                '''
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value BYTEA NOT NULL,
                    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                '''
            )

        self._run_with_retry(_do)
        self._schema_ready = True

    def get(self, key: str) -> Optional[bytes]:
        rows = self._execute('SELECT value FROM kv_store WHERE key = %s', (key,))
        return bytes(rows[0]['value']) if rows else None

    def set(self, key: str, value: bytes) -> None:
        self._execute(
            '''
            INSERT INTO kv_store (key, value) VALUES (%s, %s)
            ON CONFLICT (key) DO UPDATE
            SET value = EXCLUDED.value, updated_at = NOW()
            ''',
            (key, bytes(value)),
        )

    def delete(self, key: str) -> None:
        self._execute('DELETE FROM kv_store WHERE key = %s', (key,))
