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


import argparse
import logging
import shlex
import sys

from . import __version__
from . import cli
from .error import Error
from .params import get_params_from_config


def usage(m):
    if m:
        print(m)
    parser.print_help()
    cli.display_command_help()
    sys.exit(1)


parser = argparse.ArgumentParser(prog='keeper-folders', add_help=False, allow_abbrev=False)
parser.add_argument('--server', '-ks', dest='server', action='store', help='Keeper Host address.')
parser.add_argument('--user', '-ku', dest='user', action='store', help='User ID of the account.')
parser.add_argument('--version', dest='version', action='store_true', help='Display version')
parser.add_argument('--config', dest='config', action='store', help='Config file to use')
parser.add_argument('--debug', dest='debug', action='store_true', help='Turn on debug mode')
parser.add_argument('--proxy', dest='proxy', action='store', help='Proxy server')
parser.add_argument('command', nargs='?', type=str, action='store', help='Command')
parser.add_argument('options', nargs=argparse.REMAINDER, help='Command options')
parser.error = usage


def main():
    logging.basicConfig(format='%(message)s')

    opts = parser.parse_args(sys.argv[1:])

    if opts.version:
        print(f'Keeper Folders, version {__version__}')
        return

    try:
        params = get_params_from_config(opts.config)
    except Error as e:
        logging.error(e)
        sys.exit(1)

    if opts.debug:
        params.debug = opts.debug

    logging.getLogger().setLevel(logging.DEBUG if params.debug else logging.INFO)

    if opts.proxy:
        params.proxy = opts.proxy

    if opts.server:
        params.server = opts.server

    if opts.user is not None:
        params.user = opts.user

    if not opts.command or opts.command in ('?', 'help'):
        usage('')

    options = ' '.join([shlex.quote(x) for x in opts.options]) if opts.options else ''
    command = f'{opts.command} {options}'.strip()
    errno = cli.do_command(params, command)
    sys.exit(errno)


if __name__ == '__main__':
    main()
