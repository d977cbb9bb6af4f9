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
from typing import Optional, Dict, Any


class FolderResponse:
    def __init__(self, id=None, name=None, revision_date=None):
        self.id = id                        # type: Optional[str]
        self.name = name                    # type: Optional[str]
        self.revision_date = revision_date  # type: Optional[str]

    @classmethod
    def load(cls, rs):   # type: (dict) -> FolderResponse
        return cls(id=rs.get('id'), name=rs.get('name'), revision_date=rs.get('revisionDate'))

    def __repr__(self):
        return f'FolderResponse(id={self.id}, revision_date={self.revision_date})'


class FolderData:
    """Persisted folder record. The name is cipher text."""
    def __init__(self, id=None, name=None, user_id=None, revision_date=None):
        self.id = id                        # type: Optional[str]
        self.name = name                    # type: Optional[str]
        self.user_id = user_id              # type: Optional[str]
        self.revision_date = revision_date  # type: Optional[str]

    @classmethod
    def from_response(cls, response, user_id):   # type: (FolderResponse, str) -> FolderData
        return cls(id=response.id, name=response.name, user_id=user_id, revision_date=response.revision_date)

    @classmethod
    def load(cls, data):   # type: (Dict[str, Any]) -> FolderData
        return cls(id=data.get('id'), name=data.get('name'), user_id=data.get('userId'),
                   revision_date=data.get('revisionDate'))

    def dump(self):   # type: () -> Dict[str, Any]
        return {
            'id': self.id,
            'name': self.name,
            'userId': self.user_id,
            'revisionDate': self.revision_date,
        }

    def __eq__(self, other):
        if not isinstance(other, FolderData):
            return NotImplemented
        return self.dump() == other.dump()

    def __repr__(self):
        return f'FolderData(id={self.id}, user_id={self.user_id}, revision_date={self.revision_date})'


class FolderView:
    def __init__(self, id=None, name=None, revision_date=None):
        self.id = id                        # type: Optional[str]
        self.name = name                    # type: Optional[str]
        self.revision_date = revision_date  # type: Optional[str]

    def __eq__(self, other):
        if not isinstance(other, FolderView):
            return NotImplemented
        return (self.id, self.name, self.revision_date) == (other.id, other.name, other.revision_date)

    def __repr__(self):
        return f'FolderView(id={self.id}, name={self.name})'


class Folder:
    def __init__(self, data=None):   # type: (Optional[FolderData]) -> None
        self.id = None              # type: Optional[str]
        self.name = None            # type: Optional[str]
        self.revision_date = None   # type: Optional[str]
        if data is not None:
            self.id = data.id
            self.name = data.name
            self.revision_date = data.revision_date

    async def decrypt(self, crypto_service):    # type: (Any) -> FolderView
        view = FolderView(id=self.id, revision_date=self.revision_date)
        if self.name:
            try:
                view.name = await crypto_service.decrypt(self.name)
            except Exception as e:
                logging.debug('Folder %s name decryption error: %s', self.id, e)
        return view

    def __eq__(self, other):
        if not isinstance(other, Folder):
            return NotImplemented
        return (self.id, self.name, self.revision_date) == (other.id, other.name, other.revision_date)

    def __repr__(self):
        return f'Folder(id={self.id}, revision_date={self.revision_date})'


class FolderRequest:
    def __init__(self, folder):   # type: (Folder) -> None
        self.name = folder.name

    def to_dict(self):   # type: () -> Dict[str, Any]
        return {'name': self.name}


class CipherData:
    """Stored vault item. Only the folder reference is interpreted; other fields are kept as is."""
    def __init__(self, id=None, folder_id=None, extra=None):
        self.id = id                # type: Optional[str]
        self.folder_id = folder_id  # type: Optional[str]
        self.extra = dict(extra) if extra else {}   # type: Dict[str, Any]

    @classmethod
    def load(cls, data):   # type: (Dict[str, Any]) -> CipherData
        extra = {k: v for k, v in data.items() if k not in ('id', 'folderId')}
        return cls(id=data.get('id'), folder_id=data.get('folderId'), extra=extra)

    def dump(self):   # type: () -> Dict[str, Any]
        data = dict(self.extra)
        data['id'] = self.id
        data['folderId'] = self.folder_id
        return data

    def __eq__(self, other):
        if not isinstance(other, CipherData):
            return NotImplemented
        return self.dump() == other.dump()

    def __repr__(self):
        return f'CipherData(id={self.id}, folder_id={self.folder_id})'
