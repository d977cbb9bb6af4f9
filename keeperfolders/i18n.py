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

import locale
from typing import Any, Callable, Dict, Optional

StringCompare = Callable[[str, str], int]

DEFAULT_LOCALE = 'en_US'

STRINGS = {
    'en': {
        'noneFolder': 'No Folder',
        'folders': 'Folders',
        'folderCreated': 'Folder "{0}" created',
        'folderUpdated': 'Folder "{0}" updated',
        'folderDeleted': 'Folder "{0}" deleted',
    },
    'de': {
        'noneFolder': 'Kein Ordner',
        'folders': 'Ordner',
    },
    'fr': {
        'noneFolder': 'Aucun dossier',
        'folders': 'Dossiers',
    },
}   # type: Dict[str, Dict[str, str]]


def _sign(value):   # type: (int) -> int
    return (value > 0) - (value < 0)


def locale_compare(a, b):   # type: (str, str) -> int
    return _sign(locale.strcoll(a, b))


def folder_locale_compare(compare):
    # type: (StringCompare) -> Callable[[Any, Any], int]
    """Null names sort first. Everything else is decided by ``compare``."""
    def compare_folders(a, b):
        a_name = a.name
        b_name = b.name
        if a_name is None and b_name is not None:
            return -1
        if a_name is not None and b_name is None:
            return 1
        if a_name is None and b_name is None:
            return 0
        return _sign(compare(a_name, b_name))
    return compare_folders


class I18nService:
    def __init__(self, locale_name=DEFAULT_LOCALE, compare=None):
        # type: (str, Optional[StringCompare]) -> None
        self.locale = locale_name or DEFAULT_LOCALE
        self._compare = compare or locale_compare

    def t(self, key, *args):   # type: (str, ...) -> str
        language = self.locale.replace('-', '_').split('_')[0].lower()
        text = STRINGS.get(language, {}).get(key) or STRINGS['en'].get(key) or key
        return text.format(*args) if args else text

    def compare(self, a, b):   # type: (str, str) -> int
        return _sign(self._compare(a, b))
