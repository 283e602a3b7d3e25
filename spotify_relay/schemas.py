# spotify_relay/schemas.py
'''
Request bodies for the JSON routes.
 - parse_body: decode a request's JSON object, treating anything else as empty.
 - String fields that arrive as another JSON type are treated as absent.
 - One dataclass per route; `require_*` methods raise MissingInput with the client message.
'''

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import MissingInput

def parse_body(request) -> Dict[str, Any]:
    try:
        data = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}

def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    """Non-empty string value for `key`; anything else counts as absent."""
    value = data.get(key)
    return value if isinstance(value, str) and value else None


@dataclass
class StateRequest:
    state: Optional[str] = None

    @classmethod
    def from_request(cls, request):
        return cls(state=_text(parse_body(request), "state"))

    def require_state(self) -> str:
        if not self.state:
            raise MissingInput("Missing state")
        return self.state


class TokenRequest(StateRequest):
    pass


class LogoutRequest(StateRequest):
    pass


@dataclass
class RecommendationsRequest(StateRequest):
    mood: Optional[str] = None
    time_of_day: Optional[str] = None
    market: Optional[str] = None

    @classmethod
    def from_request(cls, request):
        data = parse_body(request)
        return cls(
            state=_text(data, "state"),
            mood=_text(data, "mood"),
            time_of_day=_text(data, "timeOfDay"),
            market=_text(data, "market"),
        )

    def require_mood(self) -> str:
        if not self.mood:
            raise MissingInput("Missing mood parameter")
        return self.mood


@dataclass
class CreatePlaylistRequest(StateRequest):
    name: Optional[str] = None
    description: Optional[str] = None
    track_uris: Any = field(default=None)

    @classmethod
    def from_request(cls, request):
        data = parse_body(request)
        return cls(
            state=_text(data, "state"),
            name=_text(data, "playlistName"),
            description=_text(data, "description"),
            track_uris=data.get("trackUris"),
        )

    def require_playlist(self) -> List[str]:
        if not self.name or not isinstance(self.track_uris, list):
            raise MissingInput("Missing playlist data")
        return self.track_uris
