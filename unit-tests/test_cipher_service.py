from unittest import IsolatedAsyncioTestCase

from data_folders import FolderEnvironment
from keeperfolders.models import CipherData


class TestCipherService(IsolatedAsyncioTestCase):
    def setUp(self):
        self.env = FolderEnvironment()
        self.service = self.env.cipher_service

    async def test_get_all_for_user_empty(self):
        self.assertEqual(await self.service.get_all_for_user(self.env.user_id), {})

    async def test_get_all_for_user(self):
        self.env.seed_ciphers({'c1': 'f1', 'c2': None})
        ciphers = await self.service.get_all_for_user(self.env.user_id)
        self.assertEqual(set(ciphers.keys()), {'c1', 'c2'})
        self.assertEqual(ciphers['c1'].folder_id, 'f1')
        self.assertEqual(ciphers['c1'].extra, {'type': 1, 'name': 'enc'})
        self.assertEqual(await self.service.get_all_for_user('someone-else'), {})

    async def test_bulk_update_merges(self):
        self.env.seed_ciphers({'c1': 'f1', 'c2': 'f1'})
        await self.service.bulk_update([CipherData(id='c1', folder_id=None, extra={'type': 1, 'name': 'enc'}),
                                        CipherData(id='c3', folder_id='f2')])

        stored = self.env.stored_ciphers()
        self.assertEqual(set(stored.keys()), {'c1', 'c2', 'c3'})
        self.assertIsNone(stored['c1']['folderId'])
        self.assertEqual(stored['c1']['type'], 1)
        self.assertEqual(stored['c2']['folderId'], 'f1')

    async def test_replace_and_clear(self):
        self.env.seed_ciphers({'c1': 'f1'})
        await self.service.replace({'c9': CipherData(id='c9')})
        self.assertEqual(list(self.env.stored_ciphers().keys()), ['c9'])

        await self.service.clear(self.env.user_id)
        self.assertIsNone(self.env.stored_ciphers())

    async def test_id_taken_from_mapping_key(self):
        self.env.storage._items[self.env.ciphers_key] = {'c1': {'folderId': 'f1', 'type': 1}}
        ciphers = await self.service.get_all_for_user(self.env.user_id)
        self.assertEqual(ciphers['c1'].id, 'c1')

        ciphers['c1'].folder_id = None
        await self.service.bulk_update(ciphers.values())
        self.assertEqual(self.env.stored_ciphers(), {'c1': {'id': 'c1', 'folderId': None, 'type': 1}})
