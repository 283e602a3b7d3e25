# spotify_relay/views/session.py
'''
This module handles the per-session token routes used by the frontend.
 - token: hands back a usable access token, refreshing it when it is about to expire.
 - logout: forgets the tokens cached for a state.
'''

import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from ..errors import ProviderAuthError
from ..schemas import LogoutRequest, TokenRequest
from ..services import auth as svc
from .common import json_errors

logger = logging.getLogger(__name__)

@csrf_exempt
@require_POST
@json_errors
def token(request):
    state = TokenRequest.from_request(request).require_state()
    try:
        record = svc.refresh_session_token(request.token_store, state)
    except ProviderAuthError as exc:
        raise ProviderAuthError("Spotify refresh failed", detail=exc.detail) from exc

    return JsonResponse({
        "access_token": record.access_token,
        # epoch milliseconds, comparable with Date.now() on the frontend
        "expires_at": int(record.expires_at * 1000),
    })

@csrf_exempt
@require_POST
def logout(request):
    state = LogoutRequest.from_request(request).state
    if state and state in request.token_store:
        request.token_store.delete(state)
        logger.info("[TOKEN] Cleared tokens for state %s", state)
    return JsonResponse({"success": True})
