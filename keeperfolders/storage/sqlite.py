#  _  __
# | |/ /___ ___ _ __  ___ _ _ ®
# | ' </ -_) -_) '_ \/ -_) '_|
# |_|\_\___\___| .__/\___|_|
#              |_|
#
# Keeper Folders
# Copyright 2024 Keeper Security Inc.
# Contact: ops@keepersecurity.com
#

import asyncio
import functools
import json
import logging
import sqlite3
import threading
from typing import Callable, Optional

from .types import IKeyValueStorage

TABLE_NAME = 'KeyValue'


def verify_database(connection):   # type: (sqlite3.Connection) -> None
    existing_tables = set((x[0].lower() for x in
                           connection.execute('SELECT name FROM sqlite_master where type=?', ('table',))))
    if TABLE_NAME.lower() not in existing_tables:
        logging.debug('Creating table "%s"', TABLE_NAME)
        connection.execute(f'CREATE TABLE {TABLE_NAME} (key TEXT NOT NULL PRIMARY KEY, value TEXT)')
        connection.commit()


class SqliteKeyValueStorage(IKeyValueStorage):
    """Values are stored as JSON text, one row per key.

    sqlite calls block, so each one runs in the event loop's default executor.
    The connection is shared by executor threads and must be opened with
    ``check_same_thread=False``.
    """
    def __init__(self, get_connection):   # type: (Callable[[], sqlite3.Connection]) -> None
        self.get_connection = get_connection
        self._lock = threading.Lock()
        self._verified = False

    @classmethod
    def open(cls, database):   # type: (str) -> SqliteKeyValueStorage
        connection = sqlite3.connect(database, check_same_thread=False)
        return cls(lambda: connection)

    def _connection(self):   # type: () -> sqlite3.Connection
        connection = self.get_connection()
        if not self._verified:
            verify_database(connection)
            self._verified = True
        return connection

    async def _execute(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args))

    def _get(self, key):   # type: (str) -> Optional[str]
        with self._lock:
            row = self._connection().execute(
                f'SELECT value FROM {TABLE_NAME} WHERE key=?', (key,)).fetchone()
        return row[0] if row else None

    def _save(self, key, data):   # type: (str, str) -> None
        with self._lock:
            connection = self._connection()
            connection.execute(f'INSERT OR REPLACE INTO {TABLE_NAME} (key, value) VALUES (?, ?)', (key, data))
            connection.commit()

    def _remove(self, key):   # type: (str) -> None
        with self._lock:
            connection = self._connection()
            connection.execute(f'DELETE FROM {TABLE_NAME} WHERE key=?', (key,))
            connection.commit()

    async def get(self, key):
        data = await self._execute(self._get, key)
        if data is None:
            return None
        return json.loads(data)

    async def save(self, key, value):
        await self._execute(self._save, key, json.dumps(value))

    async def remove(self, key):
        await self._execute(self._remove, key)
