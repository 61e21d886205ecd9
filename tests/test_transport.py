import logging

import httpx
import pytest
import respx
from index_aliases.config import Settings
from index_aliases.transport import HttpTransport, dump_request, dump_response


@respx.mock
def test_send_returns_raw_response(settings):
    respx.post(host="search.test", path="/_aliases").respond(500, text="oops")
    transport = HttpTransport(settings)

    response = transport.send("POST", "/_aliases", json={"actions": []})

    assert response.status_code == 500
    assert response.text == "oops"
    transport.close()


@respx.mock
def test_basic_auth_applied_when_configured():
    route = respx.post(host="search.test", path="/_aliases").respond(200, json={})
    transport = HttpTransport(
        Settings(base_url="http://search.test", username="elastic", password="changeme")
    )

    transport.send("POST", "/_aliases", json={"actions": []})

    assert route.calls[0].request.headers["Authorization"].startswith("Basic ")
    transport.close()


@respx.mock
def test_no_auth_header_without_credentials(settings):
    route = respx.post(host="search.test", path="/_aliases").respond(200, json={})
    transport = HttpTransport(settings)

    transport.send("POST", "/_aliases", json={"actions": []})

    assert "Authorization" not in route.calls[0].request.headers
    transport.close()


@respx.mock
def test_debug_dumps_request_and_response(settings, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="index_aliases.transport")
    respx.post(host="search.test", path="/_aliases").respond(
        200, json={"ok": True, "acknowledged": True}
    )
    transport = HttpTransport(settings)

    transport.send(
        "POST",
        "/_aliases",
        params={"pretty": "true"},
        json={"actions": [{"add": {"index": "i", "alias": "a"}}]},
        debug=True,
    )

    messages = [record.getMessage() for record in caplog.records]
    assert any("POST /_aliases?pretty=true HTTP/1.1" in message for message in messages)
    assert any('"alias":"a"' in message.replace(" ", "") for message in messages)
    assert any("200 OK" in message for message in messages)
    transport.close()


@respx.mock
def test_no_dump_without_debug(settings, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="index_aliases.transport")
    respx.post(host="search.test", path="/_aliases").respond(200, json={})
    transport = HttpTransport(settings)

    transport.send("POST", "/_aliases", json={"actions": []})

    assert not [r for r in caplog.records if r.name == "index_aliases.transport"]
    transport.close()


@respx.mock
def test_transport_error_logged_and_reraised(settings, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.WARNING, logger="index_aliases.transport")
    respx.post(host="search.test", path="/_aliases").mock(
        side_effect=httpx.ConnectError("refused")
    )
    transport = HttpTransport(settings)

    with pytest.raises(httpx.ConnectError):
        transport.send("POST", "/_aliases", json={"actions": []})

    assert any("alias_transport_failed" in record.getMessage() for record in caplog.records)
    transport.close()


def test_dump_helpers_render_wire_form():
    request = httpx.Request("POST", "http://search.test/_aliases", json={"actions": []})
    response = httpx.Response(400, text="bad", request=request)

    assert dump_request(request).startswith("POST /_aliases HTTP/1.1\n")
    assert dump_response(response).startswith("HTTP/1.1 400 Bad Request\n")
    assert dump_response(response).endswith("\n\nbad")
