"""
openloadpy - Python client for the Openload file hosting API.

Usage:
    >>> from openloadpy import OpenloadClient
    >>>
    >>> with OpenloadClient("login", "key") as ol:
    ...     for f in ol.list_folder().files:
    ...         print(f.name, f.size)
"""
import logging
from .client import OpenloadClient

# Configuration
from .core.api import (
    APIClient,
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    Credentials,
)

# Errors
from .core.exceptions import (
    OpenloadException,
    ConfigurationError,
    TransportError,
    DecodeError,
    ResultShapeError,
    APIError,
)

# Results
from .core.models import (
    AccountInfo,
    TrafficInfo,
    DownloadTicket,
    DownloadLink,
    FileInfo,
    UploadLink,
    UploadResult,
    RemoteUpload,
    RemoteUploadStatus,
    FolderEntry,
    FileEntry,
    FolderListing,
    RunningConversion,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for openloadpy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'openloadpy',
        'openloadpy.client',
        'openloadpy.api',
        'openloadpy.api.request',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        # Ensure propagation is enabled
        logger.propagate = True


__all__ = [
    'OpenloadClient',
    'APIClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'Credentials',
    'OpenloadException',
    'ConfigurationError',
    'TransportError',
    'DecodeError',
    'ResultShapeError',
    'APIError',
    'AccountInfo',
    'TrafficInfo',
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
    'setup_logging',
]
