# spotify_relay/urls.py
from django.urls import path
from .views import auth, session, playlists, recommendations, root

urlpatterns = [
    # Health
    path("health", root.health),

    # Auth
    path("login", auth.login_redirect),
    path("callback", auth.auth_callback),

    # Session tokens
    path("api/spotify/token", session.token),
    path("api/spotify/logout", session.logout),

    # Proxied Web API calls
    path("api/spotify/recommendations", recommendations.recommendations),
    path("api/spotify/create-playlist", playlists.create_playlist),
]
