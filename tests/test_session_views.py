"""Tests for the token and logout routes."""

import time
from unittest.mock import patch

from spotify_relay.store import TokenRecord

from .helpers import fake_response


def _post(client, path, body):
    return client.post(path, body, content_type="application/json")


class TestToken:
    def test_missing_state_is_400(self, client):
        resp = _post(client, "/api/spotify/token", {})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing state"}

    def test_malformed_body_is_400(self, client):
        resp = client.post("/api/spotify/token", "not json", content_type="application/json")
        assert resp.status_code == 400

    @patch("spotify_relay.services.auth.sp_post_form")
    def test_unknown_state_is_401_without_network(self, post, client):
        resp = _post(client, "/api/spotify/token", {"state": "ghost"})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Not authenticated with Spotify"}
        post.assert_not_called()

    def test_returns_cached_token(self, client, token_store, fresh_record):
        token_store.put("s1", fresh_record)
        resp = _post(client, "/api/spotify/token", {"state": "s1"})
        assert resp.status_code == 200
        assert resp.json() == {
            "access_token": "access-123",
            "expires_at": int(fresh_record.expires_at * 1000),
        }

    @patch("spotify_relay.services.auth.sp_post_form")
    def test_refreshes_expiring_token(self, post, client, token_store):
        post.return_value = fake_response(200, {"access_token": "refreshed", "expires_in": 3600})
        token_store.put("s1", TokenRecord("old", "r1", expires_at=time.time() + 3))

        resp = _post(client, "/api/spotify/token", {"state": "s1"})

        assert resp.status_code == 200
        assert resp.json()["access_token"] == "refreshed"
        assert token_store.get("s1").refresh_token == "r1"

    @patch("spotify_relay.services.auth.sp_post_form")
    def test_refresh_failure_is_401(self, post, client, token_store):
        post.return_value = fake_response(400, text='{"error":"invalid_grant"}')
        token_store.put("s1", TokenRecord("old", "r1", expires_at=time.time() - 60))

        resp = _post(client, "/api/spotify/token", {"state": "s1"})

        assert resp.status_code == 401
        assert resp.json() == {"error": "Spotify refresh failed"}
        assert post.call_count == 1

    @patch("spotify_relay.services.auth.sp_post_form")
    def test_non_json_refresh_response_is_401(self, post, client, token_store):
        post.return_value = fake_response(200, invalid_json=True)
        token_store.put("s1", TokenRecord("old", "r1", expires_at=time.time() - 60))

        resp = _post(client, "/api/spotify/token", {"state": "s1"})

        assert resp.status_code == 401
        assert resp.json() == {"error": "Spotify refresh failed"}
        assert token_store.get("s1").access_token == "old"

    def test_non_string_state_is_400(self, client):
        resp = _post(client, "/api/spotify/token", {"state": ["a"]})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing state"}

    def test_get_not_allowed(self, client):
        assert client.get("/api/spotify/token").status_code == 405


class TestLogout:
    def test_logout_removes_entry(self, client, token_store, fresh_record):
        token_store.put("s1", fresh_record)

        resp = _post(client, "/api/spotify/logout", {"state": "s1"})

        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert "s1" not in token_store
        assert _post(client, "/api/spotify/token", {"state": "s1"}).status_code == 401

    def test_logout_unknown_state_still_succeeds(self, client):
        assert _post(client, "/api/spotify/logout", {"state": "nobody"}).json() == {"success": True}

    def test_logout_without_state(self, client, token_store, fresh_record):
        token_store.put("s1", fresh_record)
        assert _post(client, "/api/spotify/logout", {}).json() == {"success": True}
        assert "s1" in token_store

    def test_logout_with_non_string_state(self, client, token_store, fresh_record):
        token_store.put("s1", fresh_record)
        resp = _post(client, "/api/spotify/logout", {"state": {"nested": "s1"}})
        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert "s1" in token_store
