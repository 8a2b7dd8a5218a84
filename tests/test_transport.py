import pytest
from unittest.mock import MagicMock

import httpx

from providerhub.client.transport import REQUEST_ID_HEADER, HttpxTransport
from providerhub.client.types import HttpRequest, HttpResponse
from providerhub.core.exceptions import TransportError
from providerhub.models.client_config import ClientSettings


def _response(status_code=200, body=None, content=b"{}"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.headers = {"content-type": "application/json"}
    response.json.return_value = body
    return response


def _settings(**overrides):
    return ClientSettings(base_url="https://management.example.test", **overrides)


def test_send_returns_parsed_json_response():
    client = MagicMock(spec=httpx.Client)
    client.request.return_value = _response(body={"endpointUri": "https://x.test"})

    transport = HttpxTransport(_settings(), client=client)
    resp = transport.send(HttpRequest(method="GET", url="/extensions/default"))

    assert isinstance(resp, HttpResponse)
    assert resp.ok
    assert resp.body == {"endpointUri": "https://x.test"}

    args, kwargs = client.request.call_args
    assert args == ("GET", "/extensions/default")
    assert kwargs["json"] is None
    assert kwargs["params"] is None
    assert REQUEST_ID_HEADER in kwargs["headers"]


def test_send_passes_body_api_version_and_explicit_request_id():
    client = MagicMock(spec=httpx.Client)
    client.request.return_value = _response(status_code=201, body={})

    transport = HttpxTransport(_settings(api_version="2021-09-01-preview"), client=client)
    transport.send(
        HttpRequest(
            method="PUT",
            url="/extensions/default",
            body={"timeout": "PT1M"},
            headers={REQUEST_ID_HEADER: "req-1"},
        )
    )

    client.request.assert_called_once_with(
        "PUT",
        "/extensions/default",
        json={"timeout": "PT1M"},
        headers={REQUEST_ID_HEADER: "req-1"},
        params={"api-version": "2021-09-01-preview"},
    )


def test_send_returns_none_body_for_empty_content():
    client = MagicMock(spec=httpx.Client)
    client.request.return_value = _response(status_code=204, content=b"")

    resp = HttpxTransport(_settings(), client=client).send(HttpRequest(method="DELETE", url="/x"))

    assert resp.status_code == 204
    assert resp.body is None


def test_send_keeps_error_status_for_caller():
    client = MagicMock(spec=httpx.Client)
    client.request.return_value = _response(status_code=404, body={"error": {"code": "NotFound"}})

    resp = HttpxTransport(_settings(), client=client).send(HttpRequest(method="GET", url="/x"))

    assert not resp.ok
    assert resp.body["error"]["code"] == "NotFound"


def test_send_wraps_httpx_errors():
    client = MagicMock(spec=httpx.Client)
    client.request.side_effect = httpx.ConnectError("connection refused")

    transport = HttpxTransport(_settings(), client=client)

    with pytest.raises(TransportError, match="connection refused"):
        transport.send(HttpRequest(method="GET", url="/x"))


def test_send_raises_on_non_json_body():
    client = MagicMock(spec=httpx.Client)
    response = _response(status_code=502, content=b"<html>bad gateway</html>")
    response.json.side_effect = ValueError("Expecting value")
    response.text = "<html>bad gateway</html>"
    client.request.return_value = response

    transport = HttpxTransport(_settings(), client=client)

    with pytest.raises(TransportError, match="Failed to parse response as JSON") as exc:
        transport.send(HttpRequest(method="GET", url="/x"))

    assert exc.value.status_code == 502


def test_context_manager_closes_client():
    client = MagicMock(spec=httpx.Client)

    with HttpxTransport(_settings(), client=client):
        pass

    client.close.assert_called_once()


def test_builds_own_client_from_settings():
    transport = HttpxTransport(_settings(timeout_seconds=5.0, headers={"X-Test": "1"}))
    try:
        assert str(transport._client.base_url).startswith("https://management.example.test")
        assert transport._client.headers["X-Test"] == "1"
    finally:
        transport.close()
