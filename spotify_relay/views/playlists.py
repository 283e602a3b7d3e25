# spotify_relay/views/playlists.py
'''
This module handles playlist-related views for the relay.
- Creates a private playlist for the connected user from a list of track URIs.
'''

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from ..schemas import CreatePlaylistRequest
from ..services import playlists as svc
from .common import json_errors, require_token

@csrf_exempt
@require_POST
@json_errors
def create_playlist(request):
    body = CreatePlaylistRequest.from_request(request)
    record = require_token(request, body.require_state())
    uris = body.require_playlist()

    data = svc.create_playlist(record.access_token, body.name, body.description, uris)
    return JsonResponse(data)
