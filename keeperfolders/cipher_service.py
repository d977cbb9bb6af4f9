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
from typing import Dict, Iterable

from .models import CipherData
from .storage.types import IKeyValueStorage
from .user_service import UserService

CIPHERS_KEY_FORMAT = 'ciphers_{0}'


class CipherService:
    """Item store. Items are kept per user as one ``id -> item`` mapping."""
    def __init__(self, user_service, storage):   # type: (UserService, IKeyValueStorage) -> None
        self.user_service = user_service
        self.storage = storage

    async def get_all_for_user(self, user_id):   # type: (str) -> Dict[str, CipherData]
        ciphers = await self.storage.get(CIPHERS_KEY_FORMAT.format(user_id))
        if not ciphers:
            return {}
        result = {}
        for cipher_id, c in ciphers.items():
            cipher = CipherData.load(c)
            if not cipher.id:
                cipher.id = cipher_id
            result[cipher_id] = cipher
        return result

    async def bulk_update(self, items):   # type: (Iterable[CipherData]) -> None
        user_id = await self.user_service.get_user_id()
        storage_key = CIPHERS_KEY_FORMAT.format(user_id)
        ciphers = await self.storage.get(storage_key)
        if ciphers is None:
            ciphers = {}
        count = 0
        for item in items:
            ciphers[item.id] = item.dump()
            count += 1
        await self.storage.save(storage_key, ciphers)
        logging.debug('Updated %d item(s) for user %s', count, user_id)

    async def replace(self, ciphers):   # type: (Dict[str, CipherData]) -> None
        user_id = await self.user_service.get_user_id()
        await self.storage.save(CIPHERS_KEY_FORMAT.format(user_id),
                                {cipher_id: c.dump() for cipher_id, c in ciphers.items()})

    async def clear(self, user_id):   # type: (str) -> None
        await self.storage.remove(CIPHERS_KEY_FORMAT.format(user_id))
