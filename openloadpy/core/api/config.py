"""
API configuration module.

Provides configuration for the Openload API client and converts it to
keyword arguments understood by ``requests``.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple, Union


@dataclass(frozen=True)
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to requests proxies mapping."""
        if not self.url:
            return None

        url = self.url
        if self.username and self.password and '://' in url:
            # Insert credentials into URL
            protocol, rest = url.split('://', 1)
            url = f"{protocol}://{self.username}:{self.password}@{rest}"

        return {'http': url, 'https': url}


@dataclass(frozen=True)
class SSLConfig:
    """
    SSL/TLS configuration.

    ``ca_file`` takes precedence over ``verify`` when set.
    """
    verify: bool = True
    ca_file: Optional[str] = None
    cert_file: Optional[str] = None
    key_file: Optional[str] = None

    def to_requests_verify(self) -> Union[bool, str]:
        """Value for the requests ``verify`` argument."""
        if self.ca_file:
            return self.ca_file
        return self.verify

    def to_requests_cert(self) -> Optional[Union[str, Tuple[str, str]]]:
        """Value for the requests ``cert`` argument."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file


@dataclass(frozen=True)
class TimeoutConfig:
    """
    Timeout configuration.

    Both values are seconds; ``None`` means wait forever, which is what
    requests does by default.
    """
    connect: Optional[float] = None
    read: Optional[float] = None

    def to_requests_timeout(self) -> Optional[Union[float, Tuple]]:
        """Convert to requests timeout argument."""
        if self.connect is None and self.read is None:
            return None
        return (self.connect, self.read)


@dataclass(frozen=True)
class APIConfig:
    """
    Complete API configuration.

    Centralizes all configuration options for the Openload API client.
    Extend by creating new config instances, never by mutating one.
    """
    # Endpoint settings
    base_url: str = 'https://api.openload.co'
    version: str = '1'

    # User agent
    user_agent: str = 'openloadpy/1.0.0'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: Optional[int] = None  # e.g. logging.DEBUG; None leaves levels alone

    @property
    def api_url(self) -> str:
        """Base URL joined with the version segment."""
        return f"{self.base_url.rstrip('/')}/{self.version.strip('/')}"

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def with_timeout(cls, connect: float, read: Optional[float] = None, **kwargs) -> 'APIConfig':
        """Create configuration with transport timeouts."""
        return cls(
            timeout=TimeoutConfig(connect=connect, read=read if read is not None else connect),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False),
            **kwargs
        )

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get attributes to set on a requests Session."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        kwargs: Dict[str, Any] = {
            'headers': headers,
            'verify': self.ssl.to_requests_verify(),
        }
        cert = self.ssl.to_requests_cert()
        if cert:
            kwargs['cert'] = cert
        proxies = self.proxy.to_requests_proxies() if self.proxy else None
        if proxies:
            kwargs['proxies'] = proxies
        return kwargs

    def get_request_kwargs(self) -> Dict[str, Any]:
        """Get per-request kwargs for session.get / session.post."""
        timeout = self.timeout.to_requests_timeout()
        if timeout is None:
            return {}
        return {'timeout': timeout}
