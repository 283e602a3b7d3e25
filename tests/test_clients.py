"""Tests for the Spotify HTTP client helpers."""

from unittest.mock import patch

from spotify_relay.clients import spotify as client


class TestUrls:
    def test_relative_paths_join_the_api_base(self):
        assert client._to_url("me") == "https://api.spotify.com/v1/me"
        assert client._to_url("/playlists/x/tracks") == "https://api.spotify.com/v1/playlists/x/tracks"

    def test_absolute_urls_pass_through(self):
        assert client._to_url("https://example.com/x") == "https://example.com/x"


class TestRequests:
    @patch("spotify_relay.clients.spotify.requests.get")
    def test_get_sends_bearer_and_timeout(self, get):
        client.sp_get("tok", "me", params={"a": 1})
        get.assert_called_once_with(
            "https://api.spotify.com/v1/me",
            headers={"Authorization": "Bearer tok"},
            params={"a": 1},
            timeout=client.TIMEOUT,
        )

    @patch("spotify_relay.clients.spotify.requests.post")
    def test_post_json(self, post):
        client.sp_post_json("tok", "users/u/playlists", json={"name": "n"})
        post.assert_called_once_with(
            "https://api.spotify.com/v1/users/u/playlists",
            headers={"Authorization": "Bearer tok"},
            json={"name": "n"},
            timeout=client.TIMEOUT,
        )
