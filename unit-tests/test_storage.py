import os
import sqlite3
import tempfile
import threading
from unittest import IsolatedAsyncioTestCase

from keeperfolders.storage.in_memory import InMemoryKeyValueStorage
from keeperfolders.storage.sqlite import SqliteKeyValueStorage


class StorageTests:
    def create_storage(self):
        raise NotImplementedError()

    async def test_get_missing(self):
        storage = self.create_storage()
        self.assertIsNone(await storage.get('folders_user'))

    async def test_save_get_remove(self):
        storage = self.create_storage()
        value = {'f1': {'id': 'f1', 'name': 'enc', 'userId': 'user', 'revisionDate': None}}
        await storage.save('folders_user', value)
        self.assertEqual(await storage.get('folders_user'), value)

        value['f2'] = {'id': 'f2'}
        await storage.save('folders_user', value)
        self.assertEqual(len(await storage.get('folders_user')), 2)

        await storage.remove('folders_user')
        self.assertIsNone(await storage.get('folders_user'))
        await storage.remove('folders_user')

    async def test_keys_are_separate(self):
        storage = self.create_storage()
        await storage.save('folders_a', {'f1': {'id': 'f1'}})
        await storage.save('folders_b', {})
        await storage.remove('folders_b')
        self.assertEqual(await storage.get('folders_a'), {'f1': {'id': 'f1'}})


class TestInMemoryStorage(StorageTests, IsolatedAsyncioTestCase):
    def create_storage(self):
        return InMemoryKeyValueStorage()

    async def test_values_are_copied(self):
        storage = self.create_storage()
        value = {'f1': {'id': 'f1'}}
        await storage.save('folders_user', value)
        value['f2'] = {'id': 'f2'}
        loaded = await storage.get('folders_user')
        self.assertEqual(loaded, {'f1': {'id': 'f1'}})
        loaded['f3'] = {'id': 'f3'}
        self.assertEqual(await storage.get('folders_user'), {'f1': {'id': 'f1'}})


class TestSqliteStorage(StorageTests, IsolatedAsyncioTestCase):
    def create_storage(self):
        connection = sqlite3.connect(':memory:', check_same_thread=False)
        self.addCleanup(connection.close)
        return SqliteKeyValueStorage(lambda: connection)

    async def test_runs_off_event_loop_thread(self):
        connection = sqlite3.connect(':memory:', check_same_thread=False)
        self.addCleanup(connection.close)
        threads = []

        def get_connection():
            threads.append(threading.get_ident())
            return connection

        storage = SqliteKeyValueStorage(get_connection)
        await storage.save('folders_user', {'f1': {'id': 'f1'}})
        await storage.get('folders_user')
        await storage.remove('folders_user')
        self.assertEqual(len(threads), 3)
        self.assertNotIn(threading.get_ident(), threads)

    async def test_persisted_across_connections(self):
        fd, path = tempfile.mkstemp(suffix='.sqlite')
        os.close(fd)
        self.addCleanup(os.remove, path)

        storage = SqliteKeyValueStorage.open(path)
        await storage.save('ciphers_user', {'c1': {'id': 'c1', 'folderId': None}})
        storage.get_connection().close()

        storage = SqliteKeyValueStorage.open(path)
        self.assertEqual(await storage.get('ciphers_user'), {'c1': {'id': 'c1', 'folderId': None}})
        storage.get_connection().close()
