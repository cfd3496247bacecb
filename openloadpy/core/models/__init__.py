"""Typed results of the Openload API endpoints."""
from .account import AccountInfo, TrafficInfo, UNLIMITED
from .files import DownloadTicket, DownloadLink, FileInfo
from .uploads import UploadLink, UploadResult, RemoteUpload, RemoteUploadStatus
from .folders import FolderEntry, FileEntry, FolderListing, RunningConversion

__all__ = [
    'AccountInfo',
    'TrafficInfo',
    'UNLIMITED',
    'DownloadTicket',
    'DownloadLink',
    'FileInfo',
    'UploadLink',
    'UploadResult',
    'RemoteUpload',
    'RemoteUploadStatus',
    'FolderEntry',
    'FileEntry',
    'FolderListing',
    'RunningConversion',
]
