# spotify_relay/views/root.py
'''
Health check view for the relay.
'''

from django.http import JsonResponse

def health(_request):
    return JsonResponse({"ok": True})
