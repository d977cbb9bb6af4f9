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

import abc
import asyncio
import functools
import json
import logging
from typing import Optional

import requests

from .error import KeeperApiError
from .models import FolderRequest, FolderResponse
from .params import RestApiContext


class IFolderApi(abc.ABC):
    @abc.abstractmethod
    async def post_folder(self, request):   # type: (FolderRequest) -> FolderResponse
        pass

    @abc.abstractmethod
    async def put_folder(self, folder_id, request):   # type: (str, FolderRequest) -> FolderResponse
        pass

    @abc.abstractmethod
    async def delete_folder(self, folder_id):   # type: (str) -> None
        pass


def execute_rest(context, method, endpoint, payload=None):
    # type: (RestApiContext, str, str, Optional[dict]) -> Optional[dict]
    url = context.server_base + endpoint
    headers = {
        'Accept': 'application/json',
        'Accept-Language': context.locale or 'en_US',
    }
    if context.access_token:
        headers['Authorization'] = f'Bearer {context.access_token}'

    logger = logging.getLogger()
    if logger.level <= logging.DEBUG:
        logger.debug('>>> Request: %s %s [%s]', method, url, json.dumps(payload, sort_keys=True) if payload else '')

    rs = requests.request(method, url, json=payload, headers=headers,
                          proxies=context.proxies, verify=context.certificate_check)

    content_type = rs.headers.get('Content-Type') or ''
    if rs.status_code >= 400:
        if content_type.startswith('application/json'):
            failure = rs.json()
            logging.debug('<<< Response Error: [%s]', failure)
            raise KeeperApiError(failure.get('error') or rs.status_code, failure.get('message') or rs.reason)
        if rs.text:
            logging.debug('<<< Response Content: [%s]', rs.text)
        raise KeeperApiError(rs.status_code, rs.reason)

    if content_type.startswith('application/json') and rs.content:
        result = rs.json()
        logging.debug('<<< Response JSON: [%s]', result)
        return result


def load_folder_response(rs):   # type: (Optional[dict]) -> FolderResponse
    if not isinstance(rs, dict) or not rs.get('id'):
        raise KeeperApiError('invalid_response', 'Folder response does not contain folder ID')
    return FolderResponse.load(rs)


class RestFolderApi(IFolderApi):
    """Folder endpoints of the vault REST API.

    The HTTP calls block, so each one runs in the event loop's default executor.
    """
    def __init__(self, context):   # type: (RestApiContext) -> None
        self.context = context

    async def _execute(self, method, endpoint, payload=None):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(execute_rest, self.context, method, endpoint, payload))

    async def post_folder(self, request):
        rs = await self._execute('POST', 'folders', request.to_dict())
        return load_folder_response(rs)

    async def put_folder(self, folder_id, request):
        rs = await self._execute('PUT', f'folders/{folder_id}', request.to_dict())
        return load_folder_response(rs)

    async def delete_folder(self, folder_id):
        await self._execute('DELETE', f'folders/{folder_id}')
