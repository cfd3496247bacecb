"""Folder listing and conversion models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import to_int, to_float, to_str, to_list


@dataclass
class FolderEntry:
    """Sub-folder in a listing."""
    id: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FolderEntry':
        return cls(id=to_str(data.get('id')), name=to_str(data.get('name')))


@dataclass
class FileEntry:
    """File in a listing."""
    name: Optional[str] = None
    sha1: Optional[str] = None
    folderid: Optional[str] = None
    upload_at: Optional[int] = None
    status: Optional[str] = None
    size: Optional[int] = None
    content_type: Optional[str] = None
    download_count: Optional[int] = None
    cstatus: Optional[str] = None
    link: Optional[str] = None
    linkextid: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileEntry':
        return cls(
            name=to_str(data.get('name')),
            sha1=to_str(data.get('sha1')),
            folderid=to_str(data.get('folderid')),
            upload_at=to_int(data.get('upload_at')),
            status=to_str(data.get('status')),
            size=to_int(data.get('size')),
            content_type=to_str(data.get('content_type')),
            download_count=to_int(data.get('download_count')),
            cstatus=to_str(data.get('cstatus')),
            link=to_str(data.get('link')),
            linkextid=to_str(data.get('linkextid')),
        )


@dataclass
class FolderListing:
    """Content of a folder: sub-folders and files."""
    folders: List[FolderEntry] = field(default_factory=list)
    files: List[FileEntry] = field(default_factory=list)

    def __iter__(self):
        yield from self.folders
        yield from self.files

    def __len__(self) -> int:
        return len(self.folders) + len(self.files)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FolderListing':
        """Create from API result; non-object entries are skipped."""
        return cls(
            folders=[FolderEntry.from_dict(f) for f in to_list(data.get('folders')) if isinstance(f, dict)],
            files=[FileEntry.from_dict(f) for f in to_list(data.get('files')) if isinstance(f, dict)],
        )


@dataclass
class RunningConversion:
    """A conversion in progress; ``progress`` is a fraction."""
    name: Optional[str] = None
    id: Optional[str] = None
    status: Optional[str] = None
    last_update: Optional[str] = None
    progress: Optional[float] = None
    retries: Optional[int] = None
    link: Optional[str] = None
    linkextid: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RunningConversion':
        return cls(
            name=to_str(data.get('name')),
            id=to_str(data.get('id')),
            status=to_str(data.get('status')),
            last_update=to_str(data.get('last_update')),
            progress=to_float(data.get('progress')),
            retries=to_int(data.get('retries')),
            link=to_str(data.get('link')),
            linkextid=to_str(data.get('linkextid')),
        )
