# -*- coding: utf-8 -*-
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

import locale  # for strcoll sort

__version__ = '1.0.0'

try:
    locale.setlocale(locale.LC_COLLATE, '')
except locale.Error:
    pass
