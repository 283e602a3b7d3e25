# spotify_relay/errors.py
'''
Error taxonomy for the relay.
 - Every error carries the HTTP status and the client-safe message the views return.
 - Provider details never go into `message`; services log them instead.
'''

from __future__ import annotations


class RelayError(Exception):
    status = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None, *, detail=None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class MissingInput(RelayError):
    status = 400
    default_message = "Missing input"


class Unauthenticated(RelayError):
    status = 401
    default_message = "Not authenticated with Spotify"


class ProviderAuthError(RelayError):
    """Token endpoint rejected a code or refresh exchange."""
    status = 401
    default_message = "Spotify authentication failed"


class ProviderRequestError(RelayError):
    """A Web API call (recommendations, profile, playlists) failed."""
    status = 500
    default_message = "Spotify request failed"
