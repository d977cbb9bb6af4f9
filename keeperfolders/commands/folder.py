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

import argparse
import asyncio
import logging

from . import base
from .base import Command, dump_report_data, raise_parse_exception, suppress_exit
from ..error import CommandError
from ..models import FolderView
from ..params import FolderParams
from ..vault import get_folder_service


def register_commands(commands, aliases):
    commands['ls'] = FolderListCommand()
    commands['mkdir'] = FolderMakeCommand()
    commands['rndir'] = FolderRenameCommand()
    commands['rmdir'] = FolderRemoveCommand()
    aliases['list'] = 'ls'
    aliases['md'] = 'mkdir'
    aliases['rd'] = 'rmdir'


ls_parser = argparse.ArgumentParser(prog='ls', description='List folders.', parents=[base.json_output_parser])
ls_parser.add_argument('--refresh', dest='refresh', action='store_true', help='rebuild the decrypted folder list')
ls_parser.error = raise_parse_exception
ls_parser.exit = suppress_exit

mkdir_parser = argparse.ArgumentParser(prog='mkdir', description='Create a folder.')
mkdir_parser.add_argument('name', type=str, action='store', help='folder name')
mkdir_parser.error = raise_parse_exception
mkdir_parser.exit = suppress_exit

rndir_parser = argparse.ArgumentParser(prog='rndir', description='Rename a folder.')
rndir_parser.add_argument('folder', type=str, action='store', help='folder ID')
rndir_parser.add_argument('name', type=str, action='store', help='new folder name')
rndir_parser.error = raise_parse_exception
rndir_parser.exit = suppress_exit

rmdir_parser = argparse.ArgumentParser(prog='rmdir', description='Remove a folder. Its items are moved to "No Folder".')
rmdir_parser.add_argument('folder', type=str, action='store', help='folder ID')
rmdir_parser.error = raise_parse_exception
rmdir_parser.exit = suppress_exit


class FolderListCommand(Command):
    def get_parser(self):
        return ls_parser

    def execute(self, params, **kwargs):   # type: (FolderParams, ...) -> str
        folder_service = get_folder_service(params)
        if kwargs.get('refresh') is True:
            folder_service.clear_cache()
        folders = asyncio.run(folder_service.get_all_decrypted())
        table = [[x.id or '', x.name or ''] for x in folders]
        headers = ['folder_uid', 'name'] if kwargs.get('format') == 'json' else ['Folder UID', 'Name']
        report = dump_report_data(table, headers, fmt=kwargs.get('format') or 'table')
        print(report)
        return report


class FolderMakeCommand(Command):
    def get_parser(self):
        return mkdir_parser

    def execute(self, params, **kwargs):   # type: (FolderParams, ...) -> str
        name = kwargs.get('name')
        if not name:
            raise CommandError('mkdir', 'Folder name cannot be empty')

        folder_service = get_folder_service(params)

        async def create_folder():
            folder = await folder_service.encrypt(FolderView(name=name))
            await folder_service.save_with_server(folder)
            return folder.id

        folder_id = asyncio.run(create_folder())
        logging.info(folder_service.i18n_service.t('folderCreated', name))
        return folder_id


class FolderRenameCommand(Command):
    def get_parser(self):
        return rndir_parser

    def execute(self, params, **kwargs):   # type: (FolderParams, ...) -> None
        folder_id = kwargs.get('folder')
        name = kwargs.get('name')
        if not name:
            raise CommandError('rndir', 'New folder name cannot be empty')

        folder_service = get_folder_service(params)

        async def rename_folder():
            if await folder_service.get(folder_id) is None:
                logging.warning('Folder "%s" is not in the local store', folder_id)
            folder = await folder_service.encrypt(FolderView(id=folder_id, name=name))
            await folder_service.save_with_server(folder)

        asyncio.run(rename_folder())
        logging.info(folder_service.i18n_service.t('folderUpdated', name))


class FolderRemoveCommand(Command):
    def get_parser(self):
        return rmdir_parser

    def execute(self, params, **kwargs):   # type: (FolderParams, ...) -> None
        folder_id = kwargs.get('folder')
        folder_service = get_folder_service(params)

        async def remove_folder():
            if await folder_service.get(folder_id) is None:
                logging.warning('Folder "%s" is not in the local store', folder_id)
            await folder_service.delete_with_server(folder_id)

        asyncio.run(remove_folder())
        logging.info(folder_service.i18n_service.t('folderDeleted', folder_id))
