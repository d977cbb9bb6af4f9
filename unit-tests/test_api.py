from unittest import IsolatedAsyncioTestCase, TestCase, mock

from keeperfolders.api import RestFolderApi
from keeperfolders.error import KeeperApiError
from keeperfolders.models import Folder, FolderRequest
from keeperfolders.params import RestApiContext


def make_response(status_code=200, json_body=None, reason='OK'):
    rs = mock.Mock()
    rs.status_code = status_code
    rs.reason = reason
    rs.headers = {'Content-Type': 'application/json; charset=utf-8'} if json_body is not None else {}
    rs.json.return_value = json_body
    rs.content = b'{}' if json_body is not None else b''
    rs.text = ''
    return rs


def make_request(name):
    folder = Folder()
    folder.name = name
    return FolderRequest(folder)


class TestRestFolderApi(IsolatedAsyncioTestCase):
    def setUp(self):
        self.context = RestApiContext(server='vault.example.com')
        self.context.access_token = 'token'
        self.api = RestFolderApi(self.context)
        self.request_mock = mock.patch('requests.request').start()

    def tearDown(self):
        mock.patch.stopall()

    async def test_post_folder(self):
        self.request_mock.return_value = make_response(
            json_body={'id': 'f1', 'name': 'enc', 'revisionDate': '2024-01-01T00:00:00Z'})
        rs = await self.api.post_folder(make_request('enc'))

        self.assertEqual(rs.id, 'f1')
        self.assertEqual(rs.name, 'enc')
        self.assertEqual(rs.revision_date, '2024-01-01T00:00:00Z')
        args, kwargs = self.request_mock.call_args
        self.assertEqual(args, ('POST', 'https://vault.example.com/api/folders'))
        self.assertEqual(kwargs['json'], {'name': 'enc'})
        self.assertEqual(kwargs['headers']['Authorization'], 'Bearer token')

    async def test_put_folder(self):
        self.request_mock.return_value = make_response(json_body={'id': 'f1', 'name': 'enc2'})
        rs = await self.api.put_folder('f1', make_request('enc2'))

        self.assertEqual(rs.name, 'enc2')
        args, _ = self.request_mock.call_args
        self.assertEqual(args, ('PUT', 'https://vault.example.com/api/folders/f1'))

    async def test_delete_folder(self):
        self.request_mock.return_value = make_response()
        await self.api.delete_folder('f1')
        args, kwargs = self.request_mock.call_args
        self.assertEqual(args, ('DELETE', 'https://vault.example.com/api/folders/f1'))
        self.assertIsNone(kwargs['json'])

    async def test_json_error(self):
        self.request_mock.return_value = make_response(
            status_code=404, json_body={'error': 'not_found', 'message': 'Folder not found'}, reason='Not Found')
        with self.assertRaises(KeeperApiError) as ctx:
            await self.api.delete_folder('f1')
        self.assertEqual(ctx.exception.result_code, 'not_found')
        self.assertEqual(ctx.exception.message, 'Folder not found')

    async def test_http_error(self):
        self.request_mock.return_value = make_response(status_code=502, reason='Bad Gateway')
        with self.assertRaises(KeeperApiError) as ctx:
            await self.api.post_folder(make_request('enc'))
        self.assertEqual(ctx.exception.result_code, 502)

    async def test_response_without_id(self):
        self.request_mock.return_value = make_response(json_body={'name': 'enc'})
        with self.assertRaises(KeeperApiError) as ctx:
            await self.api.post_folder(make_request('enc'))
        self.assertEqual(ctx.exception.result_code, 'invalid_response')


class TestRestApiContext(TestCase):
    def test_server_base(self):
        context = RestApiContext(server='https://vault.example.com:8443/anything')
        self.assertEqual(context.server_base, 'https://vault.example.com:8443/api/')

    def test_proxy(self):
        context = RestApiContext()
        context.set_proxy('http://proxy:3128')
        self.assertEqual(context.proxies['https'], 'http://proxy:3128')
        context.set_proxy(None)
        self.assertIsNone(context.proxies)
