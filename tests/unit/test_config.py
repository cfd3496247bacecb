"""Tests for configuration and session creation."""
import pytest
import requests

from openloadpy.core.api import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, SessionFactory


class TestAPIConfig:
    """Test suite for APIConfig."""

    def test_default_api_url(self):
        """Test default origin and version."""
        assert APIConfig.default().api_url == "https://api.openload.co/1"

    def test_api_url_slashes(self):
        """Test slashes are normalized."""
        config = APIConfig(base_url="https://example.com/", version="/2/")

        assert config.api_url == "https://example.com/2"

    def test_no_timeout_by_default(self):
        """Test requests' wait-forever default is kept."""
        assert APIConfig.default().get_request_kwargs() == {}

    def test_with_timeout(self):
        """Test timeout constructor."""
        config = APIConfig.with_timeout(3.0, 30.0)

        assert config.get_request_kwargs() == {"timeout": (3.0, 30.0)}

    def test_session_kwargs(self):
        """Test headers and verification settings."""
        config = APIConfig(user_agent="test/1.0", extra_headers={"X-Test": "1"})
        kwargs = config.get_session_kwargs()

        assert kwargs["headers"] == {"User-Agent": "test/1.0", "X-Test": "1"}
        assert kwargs["verify"] is True
        assert "proxies" not in kwargs
        assert "cert" not in kwargs

    def test_insecure(self):
        """Test insecure disables verification."""
        assert APIConfig.insecure().get_session_kwargs()["verify"] is False

    def test_with_proxy(self):
        """Test proxy constructor."""
        kwargs = APIConfig.with_proxy("http://proxy:8080").get_session_kwargs()

        assert kwargs["proxies"] == {"http": "http://proxy:8080", "https": "http://proxy:8080"}

    def test_frozen(self):
        """Test configuration is immutable."""
        config = APIConfig.default()

        with pytest.raises(Exception):
            config.base_url = "http://other"


class TestSubConfigs:
    """Test suite for sub-configurations."""

    def test_proxy_credentials(self):
        """Test credentials are inserted into the proxy URL."""
        proxy = ProxyConfig(url="socks5://host:1080", username="u", password="p")

        assert proxy.to_requests_proxies()["https"] == "socks5://u:p@host:1080"

    def test_proxy_empty(self):
        """Test no URL means no proxies."""
        assert ProxyConfig().to_requests_proxies() is None

    def test_ssl_ca_file(self):
        """Test CA bundle path replaces verify flag."""
        assert SSLConfig(ca_file="/etc/ca.pem").to_requests_verify() == "/etc/ca.pem"

    def test_ssl_cert(self):
        """Test client certificate forms."""
        assert SSLConfig().to_requests_cert() is None
        assert SSLConfig(cert_file="c.pem").to_requests_cert() == "c.pem"
        assert SSLConfig(cert_file="c.pem", key_file="k.pem").to_requests_cert() == ("c.pem", "k.pem")

    def test_timeout_partial(self):
        """Test a single timeout value."""
        assert TimeoutConfig(connect=2.0).to_requests_timeout() == (2.0, None)


class TestSessionFactory:
    """Test suite for SessionFactory."""

    def test_create_session(self):
        """Test session carries config."""
        config = APIConfig(
            user_agent="test/1.0",
            proxy=ProxyConfig(url="http://proxy:8080"),
            ssl=SSLConfig(verify=False),
        )

        session = SessionFactory.create_session(config)
        try:
            assert isinstance(session, requests.Session)
            assert session.headers["User-Agent"] == "test/1.0"
            assert session.verify is False
            assert session.proxies["https"] == "http://proxy:8080"
        finally:
            session.close()
