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

import logging

from .api import RestFolderApi
from .cipher_service import CipherService
from .crypto_service import CryptoService
from .folder_service import FolderService
from .i18n import I18nService
from .params import FolderParams
from .storage.in_memory import InMemoryKeyValueStorage
from .storage.sqlite import SqliteKeyValueStorage
from .user_service import UserService


def build_folder_service(params):   # type: (FolderParams) -> FolderService
    if params.storage:
        logging.debug('Opening folder storage %s', params.storage)
        storage = SqliteKeyValueStorage.open(params.storage)
    else:
        storage = InMemoryKeyValueStorage()
    user_service = UserService(params.user or None)
    crypto_service = CryptoService(params.data_key)
    i18n_service = I18nService(params.rest_context.locale)
    cipher_service = CipherService(user_service, storage)
    api = RestFolderApi(params.rest_context)
    return FolderService(crypto_service, user_service, api, storage, i18n_service, cipher_service)


def get_folder_service(params):   # type: (FolderParams) -> FolderService
    if params.folder_service is None:
        params.folder_service = build_folder_service(params)
    return params.folder_service
