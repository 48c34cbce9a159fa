import httpx
import pytest
import respx

from binance_http import BinanceAPIError, BinanceConfigError
from binance_http.transforms import CANDLE_FIELDS

SPOT = "https://api.binance.com"


@pytest.mark.anyio
@respx.mock
async def test_ping_and_time(binance):
    respx.get(f"{SPOT}/api/v1/ping").mock(return_value=httpx.Response(200, json={}))
    respx.get(f"{SPOT}/api/v1/time").mock(return_value=httpx.Response(200, json={"serverTime": 123}))

    async with binance:
        assert await binance.public.ping() is True
        assert await binance.public.time() == 123


@pytest.mark.anyio
@respx.mock
async def test_book_levels_are_zipped(binance):
    respx.get(f"{SPOT}/api/v1/depth").mock(
        return_value=httpx.Response(
            200,
            json={"lastUpdateId": 17, "asks": [["30001.0", "0.5", []]], "bids": [["30000.0", "1.2", []]]},
        )
    )

    async with binance:
        book = await binance.public.book({"symbol": "BTCUSDT"})

    assert book == {
        "lastUpdateId": 17,
        "asks": [{"price": "30001.0", "qty": "0.5"}],
        "bids": [{"price": "30000.0", "qty": "1.2"}],
    }


@pytest.mark.anyio
async def test_book_requires_symbol(binance):
    with pytest.raises(BinanceConfigError, match="Method book requires symbol parameter."):
        await binance.public.book({})


@pytest.mark.anyio
@respx.mock
async def test_candles_are_zipped(binance):
    row = [1499040000000, "0.01634790", "0.80000000", "0.01575800", "0.01577100", "148976.11427815",
           1499644799999, "2434.19055334", 308, "1756.87402397", "28.46694368", "0"]
    route = respx.get(f"{SPOT}/api/v1/klines").mock(return_value=httpx.Response(200, json=[row]))

    async with binance:
        candles = await binance.public.candles({"symbol": "BTCUSDT", "interval": "1m", "limit": 1})

    assert candles == [dict(zip(CANDLE_FIELDS, row))]
    assert candles[0]["trades"] == 308
    assert route.calls.last.request.url.params["interval"] == "1m"


@pytest.mark.anyio
async def test_candles_require_interval(binance):
    with pytest.raises(BinanceConfigError, match="interval"):
        await binance.public.candles({"symbol": "BTCUSDT"})


@pytest.mark.anyio
@respx.mock
async def test_agg_trades_are_renamed(binance):
    respx.get(f"{SPOT}/api/v1/aggTrades").mock(
        return_value=httpx.Response(
            200,
            json=[{"a": 26129, "p": "0.01633102", "q": "4.70443515", "f": 27781, "l": 27781,
                   "T": 1498793709153, "m": True, "M": True}],
        )
    )

    async with binance:
        trades = await binance.public.agg_trades({"symbol": "BTCUSDT"})

    assert trades == [{
        "aggId": 26129,
        "price": "0.01633102",
        "qty": "4.70443515",
        "firstTradeId": 27781,
        "lastTradeId": 27781,
        "time": 1498793709153,
        "isBuyerMaker": True,
    }]


@pytest.mark.anyio
@respx.mock
async def test_prices_and_book_tickers_are_indexed(binance):
    respx.get(f"{SPOT}/api/v1/ticker/allPrices").mock(
        return_value=httpx.Response(200, json=[{"symbol": "BTCUSDT", "price": "30000"}, {"symbol": "ETHUSDT", "price": "2000"}])
    )
    ticker = {"symbol": "BTCUSDT", "bidPrice": "1", "bidQty": "2", "askPrice": "3", "askQty": "4"}
    respx.get(f"{SPOT}/api/v1/ticker/allBookTickers").mock(return_value=httpx.Response(200, json=[ticker]))

    async with binance:
        assert await binance.public.prices() == {"BTCUSDT": "30000", "ETHUSDT": "2000"}
        assert await binance.public.all_book_tickers() == {"BTCUSDT": ticker}


@pytest.mark.anyio
@respx.mock
async def test_trades_history_uses_api_key(binance):
    route = respx.get(f"{SPOT}/api/v1/historicalTrades").mock(return_value=httpx.Response(200, json=[]))

    async with binance:
        await binance.public.trades_history({"symbol": "BTCUSDT"})

    request = route.calls.last.request
    assert request.headers["X-MBX-APIKEY"] == "test-key"
    assert "signature" not in request.url.params


@pytest.mark.anyio
@respx.mock
async def test_order_posts_signed_limit_order(binance):
    route = respx.post(f"{SPOT}/api/v3/order").mock(return_value=httpx.Response(200, json={"orderId": 1}))

    async with binance:
        result = await binance.trade.order({"symbol": "BTCUSDT", "side": "BUY", "quantity": 1, "price": 30000})

    assert result == {"orderId": 1}
    params = route.calls.last.request.url.params
    assert params["type"] == "LIMIT"
    assert params["timeInForce"] == "GTC"
    assert "signature" in params
    assert "timestamp" in params


@pytest.mark.anyio
@respx.mock
async def test_order_api_error_is_raised(binance):
    respx.post(f"{SPOT}/api/v3/order/test").mock(
        return_value=httpx.Response(400, json={"code": -1121, "msg": "Invalid symbol."})
    )

    async with binance:
        with pytest.raises(BinanceAPIError) as exc_info:
            await binance.trade.order_test({"symbol": "NOPE", "side": "BUY", "quantity": 1})

    assert exc_info.value.code == -1121


@pytest.mark.anyio
@respx.mock
async def test_cancel_order_uses_delete(binance):
    route = respx.delete(f"{SPOT}/api/v3/order").mock(return_value=httpx.Response(200, json={}))

    async with binance:
        await binance.trade.cancel_order({"symbol": "BTCUSDT", "orderId": 5})

    assert route.calls.last.request.url.params["orderId"] == "5"


@pytest.mark.anyio
@respx.mock
async def test_trade_fee_returns_fee_list(binance):
    route = respx.get(f"{SPOT}/wapi/v3/tradeFee.html").mock(
        return_value=httpx.Response(200, json={"tradeFee": [{"symbol": "BTCUSDT", "maker": 0.001}], "success": True})
    )

    async with binance:
        fees = await binance.account.trade_fee()

    assert fees == [{"symbol": "BTCUSDT", "maker": 0.001}]
    assert route.calls.last.request.url.path == "/wapi/v3/tradeFee.html"


@pytest.mark.anyio
@respx.mock
async def test_futures_transfer_goes_through_spot_sapi(binance):
    route = respx.post(f"{SPOT}/sapi/v1/futures/transfer").mock(return_value=httpx.Response(200, json={"tranId": 9}))

    async with binance:
        result = await binance.asset.futures_account_transfer({"asset": "USDT", "amount": 10, "type": 1})

    assert result == {"tranId": 9}
    assert "signature" in route.calls.last.request.url.params


@pytest.mark.anyio
async def test_futures_transfer_requires_type(binance):
    with pytest.raises(BinanceConfigError, match="requires type"):
        await binance.asset.futures_account_transfer({"asset": "USDT", "amount": 10})


@pytest.mark.anyio
@respx.mock
async def test_user_data_stream_lifecycle(binance):
    post = respx.post(f"{SPOT}/api/v1/userDataStream").mock(return_value=httpx.Response(200, json={"listenKey": "lk"}))
    put = respx.put(f"{SPOT}/api/v1/userDataStream").mock(return_value=httpx.Response(200, json={}))
    delete = respx.delete(f"{SPOT}/api/v1/userDataStream").mock(return_value=httpx.Response(200, json={}))

    async with binance:
        stream = await binance.user_stream.get_data_stream()
        await binance.user_stream.keep_data_stream({"listenKey": stream["listenKey"]})
        await binance.user_stream.close_data_stream({"listenKey": stream["listenKey"]})

    assert post.calls.last.request.url.query == b""
    assert dict(put.calls.last.request.url.params) == {"listenKey": "lk"}
    assert dict(delete.calls.last.request.url.params) == {"listenKey": "lk"}
    assert put.calls.last.request.headers["X-MBX-APIKEY"] == "test-key"


@pytest.mark.anyio
@respx.mock
async def test_small_order_quantity_is_sent_in_plain_notation(binance):
    route = respx.post(f"{SPOT}/api/v3/order").mock(return_value=httpx.Response(200, json={"orderId": 2}))

    async with binance:
        await binance.trade.order({"symbol": "BTCUSDT", "side": "BUY", "type": "MARKET", "quantity": 0.00005})

    assert route.calls.last.request.url.params["quantity"] == "0.00005"
