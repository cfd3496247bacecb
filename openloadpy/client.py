"""
OpenloadClient - High-level client for the Openload API.

Example:
    >>> with OpenloadClient("login", "key") as ol:
    ...     info = ol.account_info()
    ...     print(info.email)
"""
import hashlib
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Optional, Union

from .core.api import (
    APIClient,
    APIConfig,
    Credentials,
    Record,
    MappingOf,
    ListOf,
    Boolean,
    String,
)
from .core.exceptions import ResultShapeError
from .core.logging import get_logger
from .core.models import (
    AccountInfo,
    DownloadTicket,
    DownloadLink,
    FileInfo,
    UploadLink,
    UploadResult,
    RemoteUpload,
    RemoteUploadStatus,
    FolderListing,
    RunningConversion,
)

logger = get_logger(__name__)

DEFAULT_REMOTE_STATUS_LIMIT = 5
UPLOAD_FIELD = 'file1'
_HASH_CHUNK_SIZE = 1024 * 1024


def _bool_param(value: bool) -> str:
    return 'true' if value else 'false'


def sha1_of_stream(stream: BinaryIO) -> str:
    """SHA-1 hex digest of a seekable stream; the position is restored."""
    start = stream.tell()
    digest = hashlib.sha1()
    for chunk in iter(lambda: stream.read(_HASH_CHUNK_SIZE), b''):
        digest.update(chunk)
    stream.seek(start)
    return digest.hexdigest()


class OpenloadClient:
    """
    High-level synchronous client for Openload.

    Every method issues exactly one API request (``upload`` issues two:
    the upload URL request and the upload itself), blocks until the
    response is decoded and returns a typed result or raises.

    Example:
        >>> client = OpenloadClient("login", "key")
        >>> for f in client.list_folder().files:
        ...     print(f.name, f.size)
        >>> client.close()

    A custom transport can be injected:
        >>> session = requests.Session()
        >>> client = OpenloadClient("login", "key", session=session)
    """

    def __init__(
        self,
        login: str,
        key: str,
        config: Optional[APIConfig] = None,
        session=None
    ):
        """
        Initialize client.

        Args:
            login: API login
            key: API key
            config: API configuration (uses defaults if not provided)
            session: requests-compatible session to use as transport;
                not closed by close() when given
        """
        self._api = APIClient(Credentials(login, key), config=config, session=session)

    @property
    def api(self) -> APIClient:
        """Low-level API client."""
        return self._api

    def __enter__(self) -> 'OpenloadClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Release the HTTP session if this client created it."""
        self._api.close()

    # Account

    def account_info(self) -> AccountInfo:
        """Get information about the logged-in account."""
        return self._api.get('/account/info', shape=Record(AccountInfo))

    # Download

    def download_ticket(self, file_id: str) -> DownloadTicket:
        """Get a download ticket for a file.

        The ticket is used with download_link() once its wait time passed,
        together with the solved captcha when one is required.
        """
        return self._api.get('/file/dlticket', {'file': file_id}, Record(DownloadTicket))

    def download_link(self, file_id: str, ticket: str,
                      captcha_response: Optional[str] = None) -> DownloadLink:
        """Get the direct download link of a file from a ticket."""
        params = {'file': file_id, 'ticket': ticket, 'captcha_response': captcha_response}
        return self._api.get('/file/dl', params, Record(DownloadLink))

    # File info

    def files_info(self, file_ids: Iterable[str]) -> Dict[str, FileInfo]:
        """
        Get information about several files in one request.

        The returned mapping is keyed by file id and may hold fewer
        entries than requested when the service omits unknown ids.
        """
        ids = [file_ids] if isinstance(file_ids, str) else list(file_ids)
        if not ids:
            raise ValueError("At least one file id is required")
        return self._api.get('/file/info', {'file': ','.join(ids)}, MappingOf(Record(FileInfo)))

    def file_info(self, file_id: str) -> FileInfo:
        """Get information about a single file."""
        infos = self.files_info([file_id])
        if len(infos) != 1:
            raise ResultShapeError(f"Expected only one file info, got {len(infos)}", body=infos)
        return next(iter(infos.values()))

    # Upload

    def upload_link(self, folder_id: Optional[str] = None, sha1: Optional[str] = None,
                    httponly: bool = False) -> UploadLink:
        """Get a URL to upload a file to."""
        params = {'folder': folder_id, 'sha1': sha1, 'httponly': _bool_param(httponly)}
        return self._api.get('/file/ul', params, Record(UploadLink))

    def upload_from(self, stream: BinaryIO, name: str, folder_id: Optional[str] = None,
                    sha1: Optional[str] = None, httponly: bool = False) -> UploadResult:
        """
        Upload the content of a binary stream.

        Args:
            stream: Binary file-like object, read to the end
            name: File name to give the upload
            folder_id: Destination folder (account root if None)
            sha1: SHA-1 of the content; computed when the stream is
                seekable and none is given
            httponly: Ask for an HTTP (not HTTPS) upload URL

        Returns:
            UploadResult describing the created file
        """
        if sha1 is None and _is_seekable(stream):
            sha1 = sha1_of_stream(stream)
        link = self.upload_link(folder_id, sha1, httponly)
        if not link.url:
            raise ResultShapeError("Upload link response has no URL")
        logger.debug(f"Uploading {name!r} to {link.url}")
        return self._api.post_file(link.url, name, stream, Record(UploadResult), field=UPLOAD_FIELD)

    def upload(self, file_path: Union[str, Path], folder_id: Optional[str] = None,
               sha1: Optional[str] = None, httponly: bool = False) -> UploadResult:
        """Upload a local file."""
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, 'rb') as f:
            return self.upload_from(f, path.name, folder_id, sha1, httponly)

    # Remote upload

    def remote_upload(self, url: str, folder_id: Optional[str] = None) -> RemoteUpload:
        """Ask the service to fetch a file from a URL."""
        return self._api.get('/remotedl/add', {'url': url, 'folder': folder_id}, Record(RemoteUpload))

    def remote_upload_status(self, limit: Optional[int] = None,
                             upload_id: Optional[str] = None) -> Dict[str, RemoteUploadStatus]:
        """
        Check remote uploads.

        Args:
            limit: Maximum number of results (5 when None or negative)
            upload_id: Only report this remote upload

        Returns:
            Mapping of remote upload id to its status
        """
        if limit is None or limit < 0:
            limit = DEFAULT_REMOTE_STATUS_LIMIT
        params = {'limit': str(int(limit)), 'id': upload_id}
        return self._api.get('/remotedl/status', params, MappingOf(Record(RemoteUploadStatus)))

    # Folders and files

    def list_folder(self, folder_id: Optional[str] = None) -> FolderListing:
        """List a folder (the account root if folder_id is None)."""
        return self._api.get('/file/listfolder', {'folder': folder_id}, Record(FolderListing))

    def rename_folder(self, folder_id: str, name: str) -> bool:
        return self._api.get('/file/renamefolder', {'folder': folder_id, 'name': name}, Boolean())

    def rename_file(self, file_id: str, name: str) -> bool:
        return self._api.get('/file/rename', {'file': file_id, 'name': name}, Boolean())

    def delete_file(self, file_id: str) -> bool:
        return self._api.get('/file/delete', {'file': file_id}, Boolean())

    # Conversions

    def convert_file(self, file_id: str) -> bool:
        """Ask the service to convert a media file.

        Conversion settings are taken from the account settings.
        """
        return self._api.get('/file/convert', {'file': file_id}, Boolean())

    def running_conversions(self, folder_id: Optional[str] = None) -> List[RunningConversion]:
        """List conversions in progress."""
        return self._api.get('/file/runningconverts', {'folder': folder_id}, ListOf(Record(RunningConversion)))

    def splash_image(self, file_id: str) -> str:
        """Get the splash image URL of a media file."""
        return self._api.get('/file/getsplash', {'file': file_id}, String())


def _is_seekable(stream) -> bool:
    try:
        return stream.seekable()
    except (AttributeError, OSError, ValueError):
        return False
