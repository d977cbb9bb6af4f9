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
import argparse
import json
import logging
import shlex
from collections import OrderedDict
from typing import Optional, Dict, Any, List

from tabulate import tabulate

from ..params import FolderParams

json_output_parser = argparse.ArgumentParser(add_help=False)
json_output_parser.add_argument('--format', dest='format', action='store', choices=['table', 'json'],
                                default='table', help='format of output')


class ParseError(Exception):
    pass


def raise_parse_exception(m):
    raise ParseError(m)


def suppress_exit(*args):
    raise ParseError()


def dump_report_data(data, headers, fmt='table'):   # type: (List[List[Any]], List[str], str) -> str
    if fmt == 'json':
        rows = [{h: row[i] for i, h in enumerate(headers)} for row in data]
        return json.dumps(rows, indent=2)
    return tabulate(data, headers=headers)


class Command(abc.ABC):
    def execute(self, params, **kwargs):     # type: (FolderParams, Any) -> Any
        raise NotImplementedError()

    def execute_args(self, params, args, **kwargs):
        # type: (FolderParams, str, ...) -> Any
        try:
            d = {}
            d.update(kwargs)
            parser = self.get_parser()
            if parser:
                if parser.exit != suppress_exit:
                    parser.exit = suppress_exit
                if parser.error != raise_parse_exception:
                    parser.error = raise_parse_exception
                opts = parser.parse_args(shlex.split(args or ''))
                d.update(opts.__dict__)

            return self.execute(params, **d)
        except ParseError as e:
            if str(e):
                logging.error(e)

    def get_parser(self):   # type: () -> Optional[argparse.ArgumentParser]
        return None


commands = OrderedDict()    # type: Dict[str, Command]
aliases = {}                # type: Dict[str, str]
