# spotify_relay/views/common.py
'''
Helpers shared by the JSON views.
 - json_errors: turns RelayError subclasses into {"error": message} responses.
 - require_token: the cached, usable token for a state or a 401.
'''

import functools

from django.http import JsonResponse

from ..errors import RelayError, Unauthenticated
from ..services import auth as svc

def json_errors(view):
    @functools.wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except RelayError as exc:
            return JsonResponse({"error": exc.message}, status=exc.status)
    return wrapper

def require_token(request, state: str):
    record = svc.get_valid_token(request.token_store, state)
    if not record:
        raise Unauthenticated("Spotify not connected")
    return record
