# spotify_relay/views/recommendations.py
'''
This module handles the recommendations route.
- Maps the frontend's mood/time of day to a Spotify recommendations query and returns lite tracks.
'''

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from ..schemas import RecommendationsRequest
from ..services.recommendations import fetch_recommendations
from .common import json_errors, require_token

@csrf_exempt
@require_POST
@json_errors
def recommendations(request):
    body = RecommendationsRequest.from_request(request)
    record = require_token(request, body.require_state())
    mood = body.require_mood()

    tracks = fetch_recommendations(
        record.access_token, mood, body.time_of_day, market=body.market,
    )
    return JsonResponse({"tracks": tracks})
