import asyncio
import json
import os
import tempfile
from unittest import TestCase, mock

from keeperfolders import utils
from keeperfolders.api import RestFolderApi
from keeperfolders.error import Error
from keeperfolders.params import FolderParams, get_params_from_config
from keeperfolders.storage.in_memory import InMemoryKeyValueStorage
from keeperfolders.storage.sqlite import SqliteKeyValueStorage
from keeperfolders.vault import build_folder_service, get_folder_service


class TestParams(TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.config_filename = os.path.join(self.temp_dir.name, 'folders.json')

    def write_config(self, config):
        with open(self.config_filename, 'w') as f:
            if isinstance(config, str):
                f.write(config)
            else:
                json.dump(config, f)

    def test_load_config(self):
        data_key = utils.generate_aes_key()
        self.write_config({
            'server': 'vault.example.com',
            'user': 'user-1',
            'access_token': 'token',
            'data_key': utils.base64_url_encode(data_key),
            'storage': os.path.join(self.temp_dir.name, 'folders.sqlite'),
            'locale': 'de_DE',
            'proxy': 'http://proxy:3128',
            'certificate_check': False,
            'debug': True,
        })
        params = get_params_from_config(self.config_filename)

        self.assertEqual(params.server, 'https://vault.example.com/api/')
        self.assertEqual(params.user, 'user-1')
        self.assertEqual(params.rest_context.access_token, 'token')
        self.assertEqual(params.data_key, data_key)
        self.assertTrue(params.storage.endswith('folders.sqlite'))
        self.assertEqual(params.rest_context.locale, 'de_DE')
        self.assertEqual(params.proxy, 'http://proxy:3128')
        self.assertFalse(params.rest_context.certificate_check)
        self.assertTrue(params.debug)

    def test_missing_config(self):
        params = get_params_from_config(self.config_filename)
        self.assertEqual(params.config, {})
        self.assertEqual(params.user, '')
        self.assertIsNone(params.data_key)
        self.assertEqual(params.storage, '')

    def test_env_config(self):
        self.write_config({'user': 'env-user'})
        with mock.patch.dict(os.environ, {'KEEPER_FOLDERS_CONFIG': self.config_filename}):
            params = get_params_from_config()
        self.assertEqual(params.user, 'env-user')
        self.assertEqual(params.config_filename, self.config_filename)

    def test_invalid_json(self):
        self.write_config('{"user": ')
        with self.assertRaises(Error):
            get_params_from_config(self.config_filename)


class TestBuildFolderService(TestCase):
    def test_in_memory(self):
        params = FolderParams()
        params.user = 'user-1'
        service = get_folder_service(params)
        self.assertIsInstance(service.storage, InMemoryKeyValueStorage)
        self.assertIs(get_folder_service(params), service)

    def test_from_config(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            params = FolderParams()
            params.user = 'user-1'
            params.data_key = utils.generate_aes_key()
            params.storage = os.path.join(temp_dir, 'folders.sqlite')
            params.rest_context.locale = 'fr_FR'
            service = build_folder_service(params)

            self.assertIsInstance(service.storage, SqliteKeyValueStorage)
            self.assertIsInstance(service.api, RestFolderApi)
            self.assertIs(service.api.context, params.rest_context)
            folders = asyncio.run(service.get_all_decrypted())
            self.assertEqual([x.name for x in folders], ['Aucun dossier'])
            service.storage.get_connection().close()
