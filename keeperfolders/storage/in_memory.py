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

import copy
from typing import Dict, Any

from .types import IKeyValueStorage


class InMemoryKeyValueStorage(IKeyValueStorage):
    def __init__(self) -> None:
        self._items: Dict[str, Any] = {}

    async def get(self, key):
        value = self._items.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def save(self, key, value):
        self._items[key] = copy.deepcopy(value)

    async def remove(self, key):
        if key in self._items:
            del self._items[key]

    def clear(self):
        self._items.clear()
