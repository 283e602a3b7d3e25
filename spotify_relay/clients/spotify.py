# spotify_relay/clients/spotify.py
'''
Client layer for Spotify API interactions.
 - GET/POST helpers that attach the Bearer header for Web API calls.
 - A form POST helper for the accounts token endpoint.
 - No retries: one failed call is final for the request that made it.
'''

import requests

BASE = "https://api.spotify.com/v1"
TOKEN_URL = "https://accounts.spotify.com/api/token"
AUTHORIZE_URL = "https://accounts.spotify.com/authorize"

TIMEOUT = 10

def _to_url(path_or_url: str) -> str:
    return path_or_url if path_or_url.startswith("http") else f"{BASE}/{path_or_url.lstrip('/')}"

def _bearer(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}

def sp_get(access_token: str, path_or_url: str, *, params=None, timeout=TIMEOUT):
    return requests.get(
        _to_url(path_or_url),
        headers=_bearer(access_token),
        params=params or {},
        timeout=timeout,
    )

def sp_post_json(access_token: str, path_or_url: str, *, json: dict, timeout=TIMEOUT):
    return requests.post(
        _to_url(path_or_url),
        headers=_bearer(access_token),
        json=json,
        timeout=timeout,
    )

def sp_post_form(url: str, *, data: dict, headers: dict, timeout=TIMEOUT):
    return requests.post(url, data=data, headers=headers, timeout=timeout)
