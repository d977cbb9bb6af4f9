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
import shlex

from .commands import base, folder
from .error import Error, KeeperApiError
from .params import FolderParams

commands = base.commands
aliases = base.aliases
folder.register_commands(commands, aliases)


def display_command_help():
    print('\nCommands:')
    for name, command in commands.items():
        parser = command.get_parser()
        description = parser.description if parser else ''
        print(f'  {name:<10} {description}')


def do_command(params, command_line):   # type: (FolderParams, str) -> int
    cmd, _, args = command_line.strip().partition(' ')
    cmd = aliases.get(cmd, cmd)
    if cmd not in commands:
        logging.warning('Unknown command: %s', shlex.quote(cmd))
        display_command_help()
        return 1

    try:
        commands[cmd].execute_args(params, args.strip())
    except KeeperApiError as kae:
        logging.error('Server error: %s', kae)
        return 1
    except Error as e:
        logging.error(e)
        return 1
    return 0
