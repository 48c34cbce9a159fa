import json

import httpx
import pytest

from binance_http import BinanceAPIError, BinanceTransportError, send_result


def test_success_body_is_parsed():
    response = httpx.Response(200, json={"serverTime": 1})
    assert send_result(response) == {"serverTime": 1}


def test_json_error_body_becomes_api_error():
    response = httpx.Response(400, json={"code": -1121, "msg": "Invalid symbol."})

    with pytest.raises(BinanceAPIError) as exc_info:
        send_result(response)

    assert exc_info.value.message == "Invalid symbol."
    assert str(exc_info.value) == "Invalid symbol."
    assert exc_info.value.code == -1121


def test_json_error_without_msg_uses_status_line():
    response = httpx.Response(503, json={})

    with pytest.raises(BinanceAPIError) as exc_info:
        send_result(response)

    assert exc_info.value.message == "503 Service Unavailable"
    assert exc_info.value.code is None


def test_html_error_body_becomes_transport_error():
    body = "<html>502 Bad Gateway</html>"
    response = httpx.Response(502, text=body)

    with pytest.raises(BinanceTransportError) as exc_info:
        send_result(response)

    err = exc_info.value
    assert err.message == f"502 Bad Gateway {body}"
    assert body in str(err)
    assert err.response_text == body
    assert err.response is response


def test_transport_error_is_not_an_api_error():
    response = httpx.Response(504, text="upstream timed out")

    with pytest.raises(BinanceTransportError):
        send_result(response)
    with pytest.raises(Exception) as exc_info:
        send_result(response)
    assert not isinstance(exc_info.value, BinanceAPIError)


def test_malformed_success_body_propagates_parse_error():
    response = httpx.Response(200, text="not json")

    with pytest.raises(json.JSONDecodeError):
        send_result(response)
