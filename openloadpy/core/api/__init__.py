"""Openload API module."""
from .client import APIClient
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .credentials import Credentials
from .request import (
    RequestBuilder,
    RequestHandler,
    ResponseHandler,
    Envelope,
    STATUS_OK,
    ResultShape,
    Record,
    MappingOf,
    ListOf,
    Boolean,
    String,
)
from .session import SessionFactory

__all__ = [
    # Client
    'APIClient',
    'Credentials',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',

    # Request handling
    'RequestBuilder',
    'RequestHandler',
    'ResponseHandler',
    'Envelope',
    'STATUS_OK',
    'SessionFactory',

    # Result shapes
    'ResultShape',
    'Record',
    'MappingOf',
    'ListOf',
    'Boolean',
    'String',
]
