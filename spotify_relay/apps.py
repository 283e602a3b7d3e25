# spotify_relay/apps.py
from typing import Optional

from django.apps import AppConfig
from django.conf import settings
from cryptography.fernet import Fernet

from .store import TokenStore


class SpotifyRelayConfig(AppConfig):
    name = "spotify_relay"
    verbose_name = "Spotify relay"

    token_store: Optional[TokenStore] = None

    def ready(self):
        # One store per process; FERNET_KEY unset means a throwaway key.
        key = settings.FERNET_KEY
        self.token_store = TokenStore(Fernet(key.encode()) if key else None)
