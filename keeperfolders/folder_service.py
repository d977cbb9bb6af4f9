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
import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .api import IFolderApi
from .cipher_service import CipherService
from .crypto_service import ICryptoService
from .error import NoEncryptionKeyError
from .i18n import I18nService, folder_locale_compare
from .models import Folder, FolderData, FolderRequest, FolderView
from .storage.types import IKeyValueStorage
from .user_service import UserService

FOLDERS_KEY_FORMAT = 'folders_{0}'


class FolderService:
    """Folder store for the active user.

    Folders are persisted as a single ``id -> FolderData`` mapping per user. Every
    write loads the whole mapping, changes it in memory and saves it back.

    The decrypted, sorted view is cached as one tuple. Any mutation drops it
    and the next ``get_all_decrypted`` rebuilds it from storage. There is no lock:
    two readers racing on an empty cache both rebuild it and the last one wins. A
    rebuild that overlaps a mutation is returned to its caller but not cached.
    """
    def __init__(self, crypto_service, user_service, api, storage, i18n_service, cipher_service):
        # type: (ICryptoService, UserService, IFolderApi, IKeyValueStorage, I18nService, CipherService) -> None
        self.crypto_service = crypto_service
        self.user_service = user_service
        self.api = api
        self.storage = storage
        self.i18n_service = i18n_service
        self.cipher_service = cipher_service
        self._decrypted_folder_cache = None    # type: Optional[Tuple[FolderView, ...]]
        self._cache_version = 0

    def clear_cache(self):
        self._decrypted_folder_cache = None
        self._cache_version += 1

    async def _storage_key(self):   # type: () -> str
        user_id = await self.user_service.get_user_id()
        return FOLDERS_KEY_FORMAT.format(user_id)

    async def encrypt(self, model, key=None):   # type: (FolderView, Optional[bytes]) -> Folder
        folder = Folder()
        folder.id = model.id
        folder.name = await self.crypto_service.encrypt(model.name, key)
        return folder

    async def get(self, folder_id):   # type: (str) -> Optional[Folder]
        folders = await self.storage.get(await self._storage_key())
        if not folders or folder_id not in folders:
            return None
        return Folder(FolderData.load(folders[folder_id]))

    async def get_all(self):   # type: () -> List[Folder]
        folders = await self.storage.get(await self._storage_key())
        if not folders:
            return []
        return [Folder(FolderData.load(x)) for x in folders.values()]

    async def get_all_decrypted(self):   # type: () -> Tuple[FolderView, ...]
        if self._decrypted_folder_cache is not None:
            return self._decrypted_folder_cache

        if not await self.crypto_service.has_key():
            raise NoEncryptionKeyError()

        cache_version = self._cache_version
        folders = await self.get_all()
        logging.debug('Decrypting %d folder(s)', len(folders))
        decrypted = await asyncio.gather(*(x.decrypt(self.crypto_service) for x in folders))
        decrypted_folders = sorted(decrypted,
                                   key=functools.cmp_to_key(folder_locale_compare(self.i18n_service.compare)))

        none_folder = FolderView(name=self.i18n_service.t('noneFolder'))
        decrypted_folders.append(none_folder)
        view = tuple(decrypted_folders)

        # a mutation during the rebuild makes this view stale
        if cache_version == self._cache_version:
            self._decrypted_folder_cache = view
        return view

    async def save_with_server(self, folder):   # type: (Folder) -> None
        request = FolderRequest(folder)
        if folder.id is None:
            logging.debug('Creating folder')
            response = await self.api.post_folder(request)
            folder.id = response.id
        else:
            logging.debug('Updating folder %s', folder.id)
            response = await self.api.put_folder(folder.id, request)
        user_id = await self.user_service.get_user_id()
        data = FolderData.from_response(response, user_id)
        await self.upsert(data)

    async def upsert(self, folder):   # type: (Union[FolderData, Iterable[FolderData]]) -> None
        storage_key = await self._storage_key()
        folders = await self.storage.get(storage_key)
        if folders is None:
            folders = {}
        for f in ([folder] if isinstance(folder, FolderData) else folder):
            folders[f.id] = f.dump()
        await self.storage.save(storage_key, folders)
        self.clear_cache()

    async def replace(self, folders):   # type: (Dict[str, FolderData]) -> None
        storage_key = await self._storage_key()
        await self.storage.save(storage_key, {folder_id: f.dump() for folder_id, f in folders.items()})
        self.clear_cache()

    async def clear(self, user_id):   # type: (str) -> None
        await self.storage.remove(FOLDERS_KEY_FORMAT.format(user_id))
        self.clear_cache()

    async def delete(self, folder_id):   # type: (str) -> None
        user_id = await self.user_service.get_user_id()
        storage_key = FOLDERS_KEY_FORMAT.format(user_id)
        folders = await self.storage.get(storage_key)
        if folders is None or folder_id not in folders:
            logging.debug('Folder %s not found', folder_id)
            return
        del folders[folder_id]
        await self.storage.save(storage_key, folders)
        self.clear_cache()

        # Items in a deleted folder are moved to "No Folder".
        # The folder is already gone if this part fails.
        ciphers = await self.cipher_service.get_all_for_user(user_id)
        updates = []
        for cipher in ciphers.values():
            if cipher.folder_id == folder_id:
                cipher.folder_id = None
                updates.append(cipher)
        if updates:
            logging.debug('Moving %d item(s) from deleted folder %s', len(updates), folder_id)
            await self.cipher_service.bulk_update(updates)

    async def delete_with_server(self, folder_id):   # type: (str) -> None
        await self.api.delete_folder(folder_id)
        await self.delete(folder_id)
