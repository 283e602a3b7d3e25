# spotify_relay/services/recommendations.py
'''
This module turns a mood and a time of day into a recommendations query and runs it.
 - build_recommendation_params: pure lookup of the mood preset plus the time-of-day adjustment.
 - fetch_recommendations: calls /v1/recommendations and normalizes tracks for the frontend.
'''

from __future__ import annotations

import logging
from typing import Dict, Any, List, Optional

import requests

from ..clients.spotify import sp_get
from ..errors import ProviderRequestError

logger = logging.getLogger(__name__)

DEFAULT_PARAMS: Dict[str, Any] = {
    "seed_genres": "pop",
    "limit": 20,
    "target_valence": 0.6,
    "target_energy": 0.6,
    "min_tempo": 90,
    "max_tempo": 130,
}

MOOD_PRESETS: Dict[str, Dict[str, Any]] = {
    "happy": {
        "seed_genres": "pop,indie-pop",
        "target_valence": 0.85, "target_energy": 0.7,
        "min_tempo": 100, "max_tempo": 135,
    },
    "chill": {
        "seed_genres": "chill,ambient,lo-fi",
        "target_valence": 0.4, "target_energy": 0.3,
        "min_tempo": 60, "max_tempo": 95,
    },
    "focus": {
        "seed_genres": "focus,jazz,classical",
        "target_valence": 0.5, "target_energy": 0.45,
        "min_tempo": 60, "max_tempo": 110,
    },
    "energetic": {
        "seed_genres": "dance,edm,rock",
        "target_valence": 0.75, "target_energy": 0.9,
        "min_tempo": 120, "max_tempo": 150,
    },
    "nostalgic": {
        "seed_genres": "rock,classic-rock,soul",
        "target_valence": 0.5, "target_energy": 0.5,
        "min_tempo": 70, "max_tempo": 115,
    },
    "neutral": {
        "seed_genres": "pop,rock",
        "target_valence": 0.6, "target_energy": 0.6,
        "min_tempo": 80, "max_tempo": 130,
    },
}

# Deltas applied on top of the mood preset. Afternoon and unknown values add nothing.
TIME_OF_DAY_ADJUSTMENTS: Dict[str, Dict[str, float]] = {
    "morning": {"target_energy": -0.05, "min_tempo": -5},
    "evening": {"target_energy": -0.1, "max_tempo": -10},
    "night": {"target_energy": -0.2, "target_valence": -0.1, "max_tempo": -20},
}

MIN_TEMPO_FLOOR = 40
TEMPO_GAP = 5

def _unit(value: float) -> float:
    return round(max(0.0, value), 2)

def build_recommendation_params(mood: Optional[str], time_of_day: Optional[str] = None) -> Dict[str, Any]:
    """
    Deterministic (mood, time of day) -> query params. Never raises; unknown
    moods fall back to neutral and unknown times of day leave the preset alone.
    """
    params = dict(DEFAULT_PARAMS)
    params.update(MOOD_PRESETS.get((mood or "").lower(), MOOD_PRESETS["neutral"]))

    adjust = TIME_OF_DAY_ADJUSTMENTS.get((time_of_day or "").lower(), {})
    if "target_energy" in adjust:
        params["target_energy"] = _unit(params["target_energy"] + adjust["target_energy"])
    if "target_valence" in adjust:
        params["target_valence"] = _unit(params["target_valence"] + adjust["target_valence"])
    if "min_tempo" in adjust:
        params["min_tempo"] = max(MIN_TEMPO_FLOOR, params["min_tempo"] + adjust["min_tempo"])
    if "max_tempo" in adjust:
        params["max_tempo"] = max(params["min_tempo"] + TEMPO_GAP, params["max_tempo"] + adjust["max_tempo"])

    return params

def _lite(track: Dict[str, Any]) -> Dict[str, Any]:
    album = track.get("album") if isinstance(track.get("album"), dict) else {}
    imgs = [i for i in album.get("images") or [] if isinstance(i, dict)]
    artists = [a for a in track.get("artists") or [] if isinstance(a, dict)]
    return {
        "id": track.get("id"),
        "name": track.get("name"),
        "artist": ", ".join(a.get("name") or "" for a in artists),
        "album": album.get("name"),
        "duration_ms": track.get("duration_ms"),
        "image": imgs[0].get("url") if imgs else None,
        "uri": track.get("uri"),
    }

def fetch_recommendations(
    access_token: str,
    mood: str,
    time_of_day: Optional[str] = None,
    market: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Normalized recommendations for the frontend.
    Returns: [{id, name, artist, album, duration_ms, image, uri}]
    """
    params = build_recommendation_params(mood, time_of_day)
    if market:
        params["market"] = market
    query = {k: v for k, v in params.items() if v is not None}

    try:
        r = sp_get(access_token, "recommendations", params=query)
    except requests.RequestException as exc:
        logger.error("[RECS] Recommendations transport error: %s", exc)
        raise ProviderRequestError("Unable to fetch recommendations", detail=str(exc)) from exc
    if not r.ok:
        logger.error("[RECS] Recommendations failed (%s): %s", r.status_code, r.text)
        raise ProviderRequestError("Unable to fetch recommendations", detail=r.text)

    try:
        data = r.json()
    except ValueError as exc:
        logger.error("[RECS] Recommendations returned non-JSON body: %s", r.text)
        raise ProviderRequestError("Unable to fetch recommendations", detail=r.text) from exc
    tracks = data.get("tracks") if isinstance(data, dict) else None
    if tracks is None:
        tracks = []
    if not isinstance(tracks, list):
        logger.error("[RECS] Recommendations returned unexpected body: %s", r.text)
        raise ProviderRequestError("Unable to fetch recommendations", detail=r.text)

    return [_lite(t) for t in tracks if isinstance(t, dict)]
