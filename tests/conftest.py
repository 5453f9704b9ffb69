"""
Shared fixtures for the news portal tests.
Run with: pytest tests/ -v

NOTE: pytest is listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile
from unittest.mock import MagicMock

import pytest
import requests

from newsportal import create_app


ADMIN_EMAIL = "admin@example.com"


def make_config(base_dir, **extra):
    """Test configuration rooted in a temporary directory."""
    config = {
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATA_DIR": os.path.join(base_dir, "data"),
        "PUBLIC_DIR": os.path.join(base_dir, "public"),
        "DIST_DIR": os.path.join(base_dir, "dist"),
        "APP_URL": "http://localhost",
        "GOOGLE_CLIENT_ID": "client-123",
        "GOOGLE_CLIENT_SECRET": "client-secret",
        "AUTHORIZED_EMAILS": "Admin@Example.com, editor@example.com",
        "SESSION_COOKIE_SECURE": False,
        "SHARE_PRUNE_STALE": False,
    }
    config.update(extra)
    return config


def fake_response(payload, status=200):
    """Stand-in for a requests.Response from the identity provider."""
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for the store and share pages, cleaned up after."""
    d = tempfile.mkdtemp(prefix="newsportal-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_dir):
    return create_app(make_config(tmp_dir))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """Test client holding a signed admin session."""
    with client.session_transaction() as sess:
        sess["user"] = {"email": ADMIN_EMAIL, "name": "Admin"}
        sess["isAdmin"] = True
    return client


@pytest.fixture
def news_path(app):
    return app.config["NEWS_DB"]


@pytest.fixture
def share_dir(app):
    return app.config["SHARE_DIR"]
