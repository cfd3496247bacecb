"""Request handling: URL building, transport and envelope decoding."""
from .request_handler import RequestHandler
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler, Envelope, STATUS_OK
from .shapes import ResultShape, Record, MappingOf, ListOf, Boolean, String

__all__ = [
    'RequestHandler',
    'RequestBuilder',
    'ResponseHandler',
    'Envelope',
    'STATUS_OK',
    'ResultShape',
    'Record',
    'MappingOf',
    'ListOf',
    'Boolean',
    'String',
]
