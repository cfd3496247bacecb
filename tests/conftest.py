"""Pytest fixtures for openloadpy tests."""
import json
from unittest.mock import Mock

import pytest

from openloadpy import OpenloadClient


@pytest.fixture
def fake_session():
    """Session double whose get/post serve canned bodies.

    Set the body with ``fake_session.serve(body)``.
    """
    session = Mock()

    def serve(body):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode('utf-8')
        session.get.return_value = Mock(content=body, status_code=200)
        session.post.return_value = Mock(content=body, status_code=200)

    session.serve = serve
    return session


@pytest.fixture
def client(fake_session):
    """OpenloadClient wired to the session double."""
    return OpenloadClient("login1", "key1", session=fake_session)
