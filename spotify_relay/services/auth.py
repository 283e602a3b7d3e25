# spotify_relay/services/auth.py
"""
Auth/service layer for Spotify OAuth.
- Builds the authorize redirect and generates OAuth `state` values.
- Exchanges authorization codes and refresh tokens for access tokens.
- Caches the resulting tokens in the TokenStore keyed by `state`.
- Hands out a usable token per session, refreshing when the cached one is expiring.
"""

from __future__ import annotations

import base64
import logging
import secrets
import time
import urllib.parse
from typing import Dict, Any, Optional

import requests
from django.conf import settings

from ..clients.spotify import AUTHORIZE_URL, TOKEN_URL, sp_post_form
from ..errors import ProviderAuthError, Unauthenticated
from ..store import TokenRecord, TokenStore

logger = logging.getLogger(__name__)

SCOPES = [
    "user-read-email",
    "user-read-private",
    "playlist-modify-private",
    "playlist-modify-public",
]

DEFAULT_EXPIRES_IN = 3600

# ---- OAuth state + authorize URL --------------------------------------------

def generate_oauth_state(length: int = 24) -> str:
    """
    Create a random state string to correlate login, callback and later API calls.
    """
    return secrets.token_urlsafe(length)

def build_authorize_url(state: str) -> str:
    params = {
        "response_type": "code",
        "client_id": settings.SPOTIFY_CLIENT_ID,
        "redirect_uri": settings.SPOTIFY_REDIRECT_URI,
        "scope": " ".join(SCOPES),
        "state": state,
        "show_dialog": "true",
    }
    return f"{AUTHORIZE_URL}?{urllib.parse.urlencode(params)}"

# ---- Token exchange ----------------------------------------------------------

def _basic_auth_header() -> str:
    raw = f"{settings.SPOTIFY_CLIENT_ID}:{settings.SPOTIFY_CLIENT_SECRET}"
    return "Basic " + base64.b64encode(raw.encode()).decode()

def _exchange(payload: Dict[str, str]) -> Dict[str, Any]:
    headers = {
        "Authorization": _basic_auth_header(),
        "Content-Type": "application/x-www-form-urlencoded",
    }
    grant = payload["grant_type"]
    try:
        r = sp_post_form(TOKEN_URL, data=payload, headers=headers)
    except requests.RequestException as exc:
        logger.error("[AUTH] %s exchange transport error: %s", grant, exc)
        raise ProviderAuthError(detail=str(exc)) from exc

    if not r.ok:
        logger.error("[AUTH] %s exchange failed (%s): %s", grant, r.status_code, r.text)
        raise ProviderAuthError(detail=r.text)

    try:
        data = r.json()
    except ValueError as exc:
        logger.error("[AUTH] %s exchange returned non-JSON body: %s", grant, r.text)
        raise ProviderAuthError(detail=r.text) from exc
    access = data.get("access_token") if isinstance(data, dict) else None
    if not access or not isinstance(access, str):
        logger.error("[AUTH] %s exchange returned no access_token: %s", grant, r.text)
        raise ProviderAuthError(detail=r.text)
    try:
        int(data.get("expires_in") or DEFAULT_EXPIRES_IN)
    except (TypeError, ValueError) as exc:
        logger.error("[AUTH] %s exchange returned bad expires_in: %s", grant, r.text)
        raise ProviderAuthError(detail=r.text) from exc
    return data

def exchange_by_code(code: str) -> Dict[str, Any]:
    """
    Exchange an auth code for { access_token, refresh_token, expires_in, ... }.
    Raises ProviderAuthError for non-2xx responses or a body without access_token.
    """
    return _exchange({
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": settings.SPOTIFY_REDIRECT_URI,
    })

def exchange_by_refresh(refresh_token: str) -> Dict[str, Any]:
    """
    Trade a refresh token for a new access token. Spotify may or may not rotate
    the refresh token in the response.
    """
    return _exchange({
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
    })

# ---- Cache ---------------------------------------------------------------------

def store_tokens(
    store: TokenStore,
    state: str,
    token_data: Dict[str, Any],
    previous_refresh_token: Optional[str] = None,
) -> TokenRecord:
    """
    Replace the session's record wholesale with a freshly exchanged token payload.
    """
    expires_in = int(token_data.get("expires_in") or DEFAULT_EXPIRES_IN)
    refresh_token = token_data.get("refresh_token")
    if not isinstance(refresh_token, str) or not refresh_token:
        refresh_token = previous_refresh_token
    record = TokenRecord(
        access_token=token_data["access_token"],
        refresh_token=refresh_token,
        expires_at=time.time() + expires_in,
    )
    store.put(state, record)
    return record

def get_valid_token(store: TokenStore, state: Optional[str]) -> Optional[TokenRecord]:
    if not state:
        return None
    record = store.get(state)
    if record is None or not record.is_usable():
        return None
    return record

def refresh_session_token(store: TokenStore, state: str) -> TokenRecord:
    """
    Return a usable record for `state`, refreshing through the stored refresh
    token when the cached access token is expiring.
    Raises Unauthenticated when there is nothing to refresh.
    """
    record = get_valid_token(store, state)
    if record:
        return record

    stored = store.get(state)
    if stored is None or not stored.refresh_token:
        raise Unauthenticated()

    token_data = exchange_by_refresh(stored.refresh_token)
    logger.info("[AUTH] Refreshed access token for state %s", state)
    return store_tokens(store, state, token_data, previous_refresh_token=stored.refresh_token)
