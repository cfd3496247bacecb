"""Openload API client using composition."""
from typing import Any, Dict, Optional, BinaryIO

from ..config import APIConfig
from ..credentials import Credentials
from ..session import SessionFactory
from ..request import RequestBuilder, RequestHandler, ResponseHandler, ResultShape
from ...logging import get_logger, redact_params


class APIClient:
    """
    Low-level Openload API client.

    Binds credentials, a transport session and the envelope decoder
    together. Each call is one synchronous round trip.

    Example:
        >>> api = APIClient(Credentials('login', 'key'))
        >>> api.get('/account/info', shape=Record(AccountInfo))
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[APIConfig] = None,
        session=None
    ):
        """
        Initialize API client.

        Args:
            credentials: API login and key
            config: API configuration (uses defaults if not provided)
            session: requests-compatible session; a configured
                requests.Session is created when omitted
        """
        self._config = config or APIConfig.default()
        self._credentials = credentials
        self._builder = RequestBuilder(credentials, self._config.api_url)
        self._owns_session = session is None
        self._session = session if session is not None else SessionFactory.create_session(self._config)
        self._handler = RequestHandler(self._session, self._config.get_request_kwargs())
        self._logger = get_logger('api')
        if self._config.log_level is not None:
            self._logger.setLevel(self._config.log_level)
        self._closed = False

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def get(self, path: str, params: Optional[Dict[str, str]] = None,
            shape: ResultShape = None) -> Any:
        """Calls an endpoint and decodes its result with shape."""
        if shape is None:
            raise ValueError("A result shape is required")
        url = self._builder.build_url(path, params)
        self._logger.debug(
            f"GET {path} {redact_params(dict(self._builder.build_params(params)))}"
        )
        body = self._handler.get(url)
        return ResponseHandler.process(body, shape)

    def post_file(self, url: str, name: str, stream: BinaryIO,
                  shape: ResultShape, field: str = 'file1') -> Any:
        """Posts a file to an upload URL and decodes the envelope it answers."""
        self._logger.debug(f"POST upload {name!r}")
        body = self._handler.post_file(url, field, name, stream)
        return ResponseHandler.process(body, shape)

    def close(self):
        """Closes the session if this client created it."""
        if self._closed:
            return
        self._closed = True
        if self._owns_session:
            self._session.close()
