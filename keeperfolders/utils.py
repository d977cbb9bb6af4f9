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

import base64
import os
from pathlib import Path

from . import crypto


def get_default_path():
    default_path = Path.home().joinpath('.keeper')
    default_path.mkdir(parents=True, exist_ok=True)
    return default_path


def generate_uid():             # type: () -> str
    b = crypto.get_random_bytes(16)
    if (b[0] & 0xf8) == 0xf8:
        b = bytes([b[0] & 0x7f]) + b[1:]
    return base64_url_encode(b)


def generate_aes_key():         # type: () -> bytes
    return crypto.get_random_bytes(32)


def base64_url_decode(s):  # type: (str) -> bytes
    return base64.urlsafe_b64decode(s + '==')


def base64_url_encode(b):  # type: (bytes) -> str
    bs = base64.urlsafe_b64encode(b)
    return bs.decode('utf-8').rstrip('=')


def expand_path(path):   # type: (str) -> str
    return os.path.abspath(os.path.expanduser(path))
