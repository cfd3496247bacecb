"""Session factory using Factory Pattern."""
import requests

from ..config import APIConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_session(config: APIConfig) -> requests.Session:
        """Creates a synchronous HTTP session configured from config.

        No retry adapter is mounted: every call is a single attempt.
        """
        session = requests.Session()
        for name, value in config.get_session_kwargs().items():
            if name == 'headers':
                session.headers.update(value)
            else:
                setattr(session, name, value)
        return session
