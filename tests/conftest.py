"""Shared fixtures for the relay tests.

Django is configured once for the whole session; provider calls are patched
at the `requests` seam in each test module so nothing leaves the process.
"""

import os
import time

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "relay_site.settings")
os.environ["DJANGO_ALLOWED_HOSTS"] = "testserver,localhost"
os.environ["SPOTIFY_CLIENT_ID"] = "test-client"
os.environ["SPOTIFY_CLIENT_SECRET"] = "test-secret"
os.environ["SPOTIFY_REDIRECT_URI"] = "http://127.0.0.1:3000/callback"
os.environ["FRONTEND_REDIRECT"] = "https://frontend.example/#/spotify-connect"
django.setup()

from django.apps import apps  # noqa: E402
from django.test import Client  # noqa: E402

from spotify_relay.store import TokenRecord  # noqa: E402


@pytest.fixture
def token_store():
    """The process-wide store, emptied around every test."""
    store = apps.get_app_config("spotify_relay").token_store
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def client(token_store) -> Client:
    return Client()


@pytest.fixture
def fresh_record() -> TokenRecord:
    return TokenRecord(
        access_token="access-123",
        refresh_token="refresh-123",
        expires_at=time.time() + 3600,
    )

