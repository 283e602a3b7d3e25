# spotify_relay/views/auth.py
'''
This module handles the browser side of the Spotify OAuth flow.
 - Redirects users to Spotify for login, carrying the session `state`.
 - Handles the callback: exchanges the code and caches the tokens under that state.
 - Every callback outcome, failures included, is a redirect back to the frontend.
'''

import logging
import urllib.parse

from django.conf import settings
from django.http import HttpResponseRedirect
from django.views.decorators.http import require_GET

from ..errors import ProviderAuthError
from ..services import auth as svc

logger = logging.getLogger(__name__)

DEFAULT_STATE = "default"

def _frontend(**params) -> HttpResponseRedirect:
    return HttpResponseRedirect(f"{settings.FRONTEND_REDIRECT}?{urllib.parse.urlencode(params)}")

@require_GET
def login_redirect(request):
    state = request.GET.get("state") or svc.generate_oauth_state()
    return HttpResponseRedirect(svc.build_authorize_url(state))

@require_GET
def auth_callback(request):
    error = request.GET.get("error")
    if error:
        logger.info("[CALLBACK] Spotify returned error: %s", error)
        return _frontend(error=error)

    code = request.GET.get("code")
    if not code:
        return _frontend(error="missing_code")

    state = request.GET.get("state") or DEFAULT_STATE
    try:
        token_data = svc.exchange_by_code(code)
        svc.store_tokens(request.token_store, state, token_data)
    except ProviderAuthError:
        return _frontend(error="token_exchange_failed")

    logger.info("[CALLBACK] Stored tokens for state %s", state)
    return _frontend(state=state, hasTokens="true")
