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
from typing import Optional

from . import crypto, utils
from .error import NoEncryptionKeyError


class ICryptoService(abc.ABC):
    @abc.abstractmethod
    async def has_key(self):   # type: () -> bool
        pass

    @abc.abstractmethod
    async def encrypt(self, plaintext, key=None):   # type: (Optional[str], Optional[bytes]) -> Optional[str]
        pass

    @abc.abstractmethod
    async def decrypt(self, cipher_text, key=None):   # type: (str, Optional[bytes]) -> str
        pass


class CryptoService(ICryptoService):
    """Encrypts display strings with the user's data key.

    Cipher text is the base64url encoding of an AES-256-GCM blob: nonce, encrypted data, tag.
    """
    def __init__(self, data_key=None):   # type: (Optional[bytes]) -> None
        self._data_key = None   # type: Optional[bytes]
        if data_key:
            self.set_key(data_key)

    def set_key(self, key):   # type: (bytes) -> None
        if len(key) != 32:
            raise ValueError(f'Invalid data key length: {len(key)}')
        self._data_key = key

    def clear_key(self):
        self._data_key = None

    async def has_key(self):
        return self._data_key is not None

    def _resolve_key(self, key):   # type: (Optional[bytes]) -> bytes
        key = key or self._data_key
        if not key:
            raise NoEncryptionKeyError()
        return key

    async def encrypt(self, plaintext, key=None):
        if plaintext is None:
            return None
        encrypted = crypto.encrypt_aes_v2(plaintext.encode('utf-8'), self._resolve_key(key))
        return utils.base64_url_encode(encrypted)

    async def decrypt(self, cipher_text, key=None):
        encrypted = utils.base64_url_decode(cipher_text)
        return crypto.decrypt_aes_v2(encrypted, self._resolve_key(key)).decode('utf-8')
