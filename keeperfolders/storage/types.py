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
from typing import Any, Optional


class IKeyValueStorage(abc.ABC):
    @abc.abstractmethod
    async def get(self, key):   # type: (str) -> Optional[Any]
        pass

    @abc.abstractmethod
    async def save(self, key, value):   # type: (str, Any) -> None
        pass

    @abc.abstractmethod
    async def remove(self, key):   # type: (str) -> None
        pass
