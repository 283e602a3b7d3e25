# spotify_relay/middleware.py
'''
Attaches the process-wide TokenStore to each request as `request.token_store`,
so views receive the store instead of importing a global.
'''

from django.apps import apps


class TokenStoreMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.token_store = apps.get_app_config("spotify_relay").token_store
        return self.get_response(request)
