# spotify_relay/services/playlists.py
'''
This module creates playlists on behalf of the connected user.
 - create_playlist: resolve the user id, create a private playlist, then add the given tracks.
'''

from __future__ import annotations

import logging
from typing import Dict, Any, List, Optional

import requests

from ..clients.spotify import sp_get, sp_post_json
from ..errors import ProviderRequestError

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Unable to create playlist"

def _checked(call, step: str, *args, **kwargs) -> Dict[str, Any]:
    """
    Run one provider call; a transport error, a non-2xx, or an unreadable body ends the whole operation.
    """
    try:
        r = call(*args, **kwargs)
    except requests.RequestException as exc:
        logger.error("[PLAYLIST] %s transport error: %s", step, exc)
        raise ProviderRequestError(FAILURE_MESSAGE, detail=str(exc)) from exc
    if not r.ok:
        logger.error("[PLAYLIST] %s failed (%s): %s", step, r.status_code, r.text)
        raise ProviderRequestError(FAILURE_MESSAGE, detail=r.text)
    if not r.content:
        return {}
    try:
        data = r.json()
    except ValueError as exc:
        logger.error("[PLAYLIST] %s returned non-JSON body: %s", step, r.text)
        raise ProviderRequestError(FAILURE_MESSAGE, detail=r.text) from exc
    if not isinstance(data, dict):
        logger.error("[PLAYLIST] %s returned unexpected body: %s", step, r.text)
        raise ProviderRequestError(FAILURE_MESSAGE, detail=r.text)
    return data

def _require_id(body: Dict[str, Any], step: str) -> str:
    value = body.get("id")
    if not value or not isinstance(value, str):
        logger.error("[PLAYLIST] %s response has no id: %s", step, body)
        raise ProviderRequestError(FAILURE_MESSAGE, detail=str(body))
    return value

def _external_url(body: Dict[str, Any]) -> Optional[str]:
    urls = body.get("external_urls")
    return urls.get("spotify") if isinstance(urls, dict) else None

def create_playlist(
    access_token: str,
    name: str,
    description: Optional[str],
    track_uris: List[str],
) -> Dict[str, Any]:
    """
    Returns: { playlistId, playlistUrl }
    """
    me = _checked(sp_get, "profile", access_token, "me")
    user_id = _require_id(me, "profile")

    created = _checked(
        sp_post_json, "create", access_token, f"users/{user_id}/playlists",
        json={"name": name, "description": description or "", "public": False},
    )
    pid = _require_id(created, "create")

    if track_uris:
        _checked(
            sp_post_json, "add tracks", access_token, f"playlists/{pid}/tracks",
            json={"uris": track_uris},
        )

    logger.info("[PLAYLIST] Created playlist %s with %d tracks", pid, len(track_uris))
    return {
        "playlistId": pid,
        "playlistUrl": _external_url(created),
    }
