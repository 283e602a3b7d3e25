from unittest.mock import MagicMock


def fake_response(status_code: int = 200, payload=None, text: str = "", invalid_json: bool = False) -> MagicMock:
    """Stand-in for requests.Response with the attributes the services read."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    if invalid_json:
        resp.json.side_effect = ValueError("Expecting value")
        resp.text = text or "<html>oops</html>"
        resp.content = resp.text.encode()
        return resp
    resp.json.return_value = payload if payload is not None else {}
    resp.text = text or ("" if payload is None else str(payload))
    resp.content = b"{}" if payload is not None else b""
    return resp
