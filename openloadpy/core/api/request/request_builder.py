"""Request builder for API requests."""
from urllib.parse import urlencode, urlsplit
from typing import Dict, List, Optional, Tuple

from ..config import APIConfig
from ..credentials import Credentials
from ...exceptions import ConfigurationError


class RequestBuilder:
    """Builds authenticated API request URLs."""

    def __init__(self, credentials: Credentials, api_url: Optional[str] = None):
        """Initializes request builder.

        Raises:
            ConfigurationError: api_url has no scheme or host
        """
        self.credentials = credentials
        self.api_url = (api_url or APIConfig.default().api_url).rstrip('/')

        parts = urlsplit(self.api_url)
        if parts.scheme not in ('http', 'https') or not parts.netloc:
            raise ConfigurationError(f"Invalid API base URL: {self.api_url!r}")
        if parts.query or parts.fragment:
            raise ConfigurationError(f"API base URL must not carry a query: {self.api_url!r}")

    def build_params(self, params: Optional[Dict[str, str]] = None) -> List[Tuple[str, str]]:
        """Builds the ordered query: credentials first, then params.

        None values are dropped. Non-string values are rejected; booleans
        and numbers are the caller's job to stringify.
        """
        query = list(self.credentials.to_params().items())
        if params:
            for name, value in params.items():
                if value is None:
                    continue
                if not isinstance(value, str):
                    raise ValueError(
                        f"Query parameter {name!r} must be a string, got {type(value).__name__}"
                    )
                query.append((name, value))
        return query

    def build_url(self, path: str, params: Optional[Dict[str, str]] = None) -> str:
        """Builds request URL for an endpoint path such as ``/file/info``."""
        if not path.startswith('/'):
            raise ValueError(f"Endpoint path must start with '/': {path!r}")
        return f"{self.api_url}{path}?{urlencode(self.build_params(params))}"
