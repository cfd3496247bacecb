"""Data models for uploads and remote uploads."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..utils import to_int, to_str


@dataclass
class UploadLink:
    """Upload URL to post a file to, and its expiry."""
    url: Optional[str] = None
    valid_until: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadLink':
        """Create from API result."""
        return cls(
            url=to_str(data.get('url')),
            valid_until=to_str(data.get('valid_until')),
        )


@dataclass
class UploadResult:
    """File created by an upload."""
    content_type: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    sha1: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadResult':
        """Create from upload server result."""
        return cls(
            content_type=to_str(data.get('content_type')),
            id=to_str(data.get('id')),
            name=to_str(data.get('name')),
            sha1=to_str(data.get('sha1')),
            size=to_int(data.get('size')),
            url=to_str(data.get('url')),
        )


@dataclass
class RemoteUpload:
    """Remote upload accepted by the service."""
    id: Optional[str] = None
    folderid: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RemoteUpload':
        """Create from API result."""
        return cls(
            id=to_str(data.get('id')),
            folderid=to_str(data.get('folderid')),
        )


@dataclass
class RemoteUploadStatus:
    """
    Progress of one remote upload.

    Attributes:
        id: Remote upload id
        remoteurl: URL being fetched
        status: One of new, downloading, finished, error
        bytes_loaded: Bytes fetched so far (None before start)
        bytes_total: Total bytes (None before start)
        folderid: Destination folder
        added: Time the upload was added
        last_update: Time of the last progress update
        extid: File id once finished, else None
        url: File URL once finished, else None
    """
    id: Optional[int] = None
    remoteurl: Optional[str] = None
    status: Optional[str] = None
    bytes_loaded: Optional[int] = None
    bytes_total: Optional[int] = None
    folderid: Optional[str] = None
    added: Optional[str] = None
    last_update: Optional[str] = None
    extid: Optional[str] = None
    url: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status == 'finished'

    @property
    def progress(self) -> float:
        """Fraction of bytes loaded, 0.0 when unknown."""
        if not self.bytes_total or self.bytes_loaded is None:
            return 0.0
        return self.bytes_loaded / self.bytes_total

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RemoteUploadStatus':
        """Create from API result."""
        return cls(
            id=to_int(data.get('id')),
            remoteurl=to_str(data.get('remoteurl')),
            status=to_str(data.get('status')),
            bytes_loaded=to_int(data.get('bytes_loaded')),
            bytes_total=to_int(data.get('bytes_total')),
            folderid=to_str(data.get('folderid')),
            added=to_str(data.get('added')),
            last_update=to_str(data.get('last_update')),
            extid=to_str(data.get('extid')),
            url=to_str(data.get('url')),
        )
