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

from typing import Optional

from .error import Error


class UserService:
    def __init__(self, user_id=None):   # type: (Optional[str]) -> None
        self._user_id = user_id

    async def get_user_id(self):   # type: () -> str
        if not self._user_id:
            raise Error('No active user')
        return self._user_id

    def set_user_id(self, user_id):   # type: (str) -> None
        self._user_id = user_id

    def clear(self):
        self._user_id = None
