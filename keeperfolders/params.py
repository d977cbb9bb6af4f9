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

import json
import logging
import os
from typing import Optional
from urllib.parse import urlparse, urlunparse

from . import utils
from .error import Error

DEFAULT_SERVER = 'keepersecurity.com'
CONFIG_FILE_NAME = 'folders.json'


class RestApiContext:
    def __init__(self, server=DEFAULT_SERVER, locale='en_US'):
        self.server_base = server
        self.locale = locale
        self.access_token = None    # type: Optional[str]
        self.proxies = None
        self._certificate_check = True

    def __get_server_base(self):
        return self.__server_base

    def __set_server_base(self, value):    # type: (str) -> None
        if not value.startswith('http'):
            value = 'https://' + value
        p = urlparse(value)
        self.__server_base = urlunparse((p.scheme or 'https', p.netloc, '/api/', None, None, None))

    def set_proxy(self, proxy_server):
        if proxy_server:
            self.proxies = {
                'http': proxy_server,
                'https': proxy_server
            }
        else:
            self.proxies = None

    @property
    def certificate_check(self):
        return self._certificate_check

    @certificate_check.setter
    def certificate_check(self, value):
        if isinstance(value, bool):
            self._certificate_check = value

    server_base = property(__get_server_base, __set_server_base)


class FolderParams:
    def __init__(self, config_filename='', config=None, server=DEFAULT_SERVER):
        self.config_filename = config_filename
        self.config = config or {}
        self.user = ''
        self.data_key = None        # type: Optional[bytes]
        self.storage = ''
        self.debug = False
        self.rest_context = RestApiContext(server=server)
        self.folder_service = None

    @property
    def server(self):
        return self.rest_context.server_base

    @server.setter
    def server(self, value):
        self.rest_context.server_base = value

    @property
    def proxy(self):
        if self.rest_context.proxies:
            return self.rest_context.proxies.get('https')

    @proxy.setter
    def proxy(self, value):
        self.rest_context.set_proxy(value)


def resolve_config_filename(config_filename=None):   # type: (Optional[str]) -> str
    config_filename = config_filename or os.getenv('KEEPER_FOLDERS_CONFIG')
    if config_filename:
        logging.debug('Using config file %s', config_filename)
        return utils.expand_path(config_filename)
    if os.path.isfile('config.json'):
        return os.path.join(os.getcwd(), 'config.json')
    return os.path.join(utils.get_default_path(), CONFIG_FILE_NAME)


def load_config_properties(params):   # type: (FolderParams) -> None
    config = params.config
    if config.get('server'):
        params.server = config['server']
    if config.get('user'):
        params.user = config['user']
    if config.get('access_token'):
        params.rest_context.access_token = config['access_token']
    if config.get('data_key'):
        try:
            params.data_key = utils.base64_url_decode(config['data_key'])
        except Exception as e:
            raise Error(f'Configuration file error: "data_key" is not valid base64url: {e}')
    if config.get('storage'):
        params.storage = utils.expand_path(config['storage'])
    if config.get('locale'):
        params.rest_context.locale = config['locale']
    if config.get('proxy'):
        params.proxy = config['proxy']
    if 'certificate_check' in config:
        params.rest_context.certificate_check = config['certificate_check'] is True
    if config.get('debug') is True:
        params.debug = True


def get_params_from_config(config_filename=None):    # type: (Optional[str]) -> FolderParams
    if os.getenv('KEEPER_FOLDERS_DEBUG'):
        logging.getLogger().setLevel(logging.DEBUG)
        logging.info('Debug ON')

    params = FolderParams(config_filename=resolve_config_filename(config_filename))
    if os.path.exists(params.config_filename):
        try:
            with open(params.config_filename) as config_file:
                params.config = json.load(config_file)
        except IOError as ioe:
            logging.warning('Error: Unable to open config file %s: %s', params.config_filename, ioe)
        except ValueError as e:
            raise Error(f'Unable to parse JSON configuration file "{params.config_filename}": {e}')
        load_config_properties(params)

    return params
