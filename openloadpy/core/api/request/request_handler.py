"""Request handler: a single HTTP round trip per call."""
from typing import Any, Dict, Optional

import requests

from ...exceptions import TransportError
from ...logging import get_logger


class RequestHandler:
    """Performs HTTP requests over an injected session.

    The session is anything with requests-style ``get``/``post`` methods
    returning an object with ``content``. There is no retry: a failure of
    the round trip is raised as TransportError with the requests error chained.
    """

    def __init__(self, session, request_kwargs: Optional[Dict[str, Any]] = None):
        """Initializes request handler."""
        self.session = session
        self.request_kwargs = dict(request_kwargs or {})
        self.logger = get_logger('api.request')

    def get(self, url: str) -> bytes:
        """Performs a GET and returns the raw body."""
        try:
            response = self.session.get(url, **self.request_kwargs)
        except requests.RequestException as e:
            raise TransportError(f"GET request failed: {e}") from e
        body = response.content
        self.logger.debug(f"Response: {len(body)} bytes")
        return body

    def post_file(self, url: str, field: str, name: str, stream) -> bytes:
        """Performs a multipart POST of one file and returns the raw body."""
        try:
            response = self.session.post(
                url,
                files={field: (name, stream)},
                **self.request_kwargs
            )
        except requests.RequestException as e:
            raise TransportError(f"Upload request failed: {e}") from e
        body = response.content
        self.logger.debug(f"Upload response: {len(body)} bytes")
        return body
