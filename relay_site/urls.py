# relay_site/urls.py
from django.urls import include, path

urlpatterns = [
    path("", include("spotify_relay.urls")),
]
