from typing import Dict, List, Optional
from unittest import mock

from keeperfolders import crypto, utils
from keeperfolders.api import IFolderApi
from keeperfolders.cipher_service import CipherService, CIPHERS_KEY_FORMAT
from keeperfolders.crypto_service import CryptoService
from keeperfolders.folder_service import FolderService, FOLDERS_KEY_FORMAT
from keeperfolders.i18n import I18nService
from keeperfolders.models import CipherData, FolderData, FolderResponse
from keeperfolders.storage.in_memory import InMemoryKeyValueStorage
from keeperfolders.user_service import UserService

_USER_ID = 'b5f0f2cc-2d1c-4d0e-9f57-6b0c6a1e3f10'
_DATA_KEY = utils.generate_aes_key()


def ordinal_compare(a, b):
    return (a > b) - (a < b)


def casefold_compare(a, b):
    return ordinal_compare(a.casefold(), b.casefold())


class FolderEnvironment:
    def __init__(self, compare=ordinal_compare):
        self.user_id = _USER_ID
        self.data_key = _DATA_KEY
        self.storage = InMemoryKeyValueStorage()
        self.user_service = UserService(self.user_id)
        self.crypto_service = CryptoService(self.data_key)
        self.i18n_service = I18nService('en_US', compare=compare)
        self.cipher_service = CipherService(self.user_service, self.storage)
        self.api = mock.AsyncMock(spec=IFolderApi)
        self.folder_service = FolderService(self.crypto_service, self.user_service, self.api, self.storage,
                                            self.i18n_service, self.cipher_service)

    @property
    def folders_key(self):
        return FOLDERS_KEY_FORMAT.format(self.user_id)

    @property
    def ciphers_key(self):
        return CIPHERS_KEY_FORMAT.format(self.user_id)

    def encrypt_name(self, name):   # type: (Optional[str]) -> Optional[str]
        if name is None:
            return None
        return utils.base64_url_encode(crypto.encrypt_aes_v2(name.encode('utf-8'), self.data_key))

    def folder_data(self, name, folder_id=None):   # type: (Optional[str], Optional[str]) -> FolderData
        return FolderData(id=folder_id or utils.generate_uid(), name=self.encrypt_name(name), user_id=self.user_id,
                          revision_date='2024-01-15T10:00:00+00:00')

    def seed_folders(self, *names):   # type: (Optional[str]) -> List[FolderData]
        folders = [self.folder_data(x) for x in names]
        self.storage._items[self.folders_key] = {x.id: x.dump() for x in folders}
        return folders

    def seed_ciphers(self, folder_ids):   # type: (Dict[str, Optional[str]]) -> None
        self.storage._items[self.ciphers_key] = {
            cipher_id: CipherData(id=cipher_id, folder_id=folder_id, extra={'type': 1, 'name': 'enc'}).dump()
            for cipher_id, folder_id in folder_ids.items()
        }

    def stored_folders(self):   # type: () -> Optional[dict]
        return self.storage._items.get(self.folders_key)

    def stored_ciphers(self):   # type: () -> Optional[dict]
        return self.storage._items.get(self.ciphers_key)

    def folder_response(self, name, folder_id=None):   # type: (str, Optional[str]) -> FolderResponse
        return FolderResponse(id=folder_id or utils.generate_uid(), name=self.encrypt_name(name),
                              revision_date='2024-02-01T08:30:00+00:00')
