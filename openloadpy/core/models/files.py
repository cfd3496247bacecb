"""
Data models for file downloads and file information.

The download flow is two steps: a DownloadTicket (with an optional
captcha to solve), then a DownloadLink once the ticket's wait time has
passed.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..utils import to_int, to_str


@dataclass
class DownloadTicket:
    """
    Ticket for a file download.

    Attributes:
        ticket: Ticket to pass to the download link request
        captcha_url: Captcha image URL, None when no captcha is required
        captcha_w: Captcha width
        captcha_h: Captcha height
        wait_time: Seconds to wait before requesting the link
        valid_until: Ticket expiry as reported by the API
    """
    ticket: Optional[str] = None
    captcha_url: Optional[str] = None
    captcha_w: Optional[int] = None
    captcha_h: Optional[int] = None
    wait_time: int = 0
    valid_until: Optional[str] = None

    @property
    def requires_captcha(self) -> bool:
        return bool(self.captcha_url)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DownloadTicket':
        """Create from API result."""
        return cls(
            ticket=to_str(data.get('ticket')),
            captcha_url=to_str(data.get('captcha_url')),
            captcha_w=to_int(data.get('captcha_w')),
            captcha_h=to_int(data.get('captcha_h')),
            wait_time=to_int(data.get('wait_time'), 0),
            valid_until=to_str(data.get('valid_until')),
        )


@dataclass
class DownloadLink:
    """Direct download link of a file."""
    name: Optional[str] = None
    size: Optional[int] = None
    sha1: Optional[str] = None
    content_type: Optional[str] = None
    upload_at: Optional[str] = None
    url: Optional[str] = None
    token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DownloadLink':
        """Create from API result."""
        return cls(
            name=to_str(data.get('name')),
            size=to_int(data.get('size')),
            sha1=to_str(data.get('sha1')),
            content_type=to_str(data.get('content_type')),
            upload_at=to_str(data.get('upload_at')),
            url=to_str(data.get('url')),
            token=to_str(data.get('token')),
        )


@dataclass
class FileInfo:
    """
    Information about one file.

    ``status`` is the per-file HTTP-style status (200 when the file is
    available, 404 when unknown, 451 when taken down). Unavailable files
    report their other fields as ``false``, decoded here as None.
    """
    id: Optional[str] = None
    status: Optional[int] = None
    name: Optional[str] = None
    size: Optional[int] = None
    sha1: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.status == 200

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileInfo':
        """Create from API result."""
        return cls(
            id=to_str(data.get('id')),
            status=to_int(data.get('status')),
            name=to_str(data.get('name')),
            size=to_int(data.get('size')),
            sha1=to_str(data.get('sha1')),
            content_type=to_str(data.get('content_type')),
        )
