"""
合约公共 API（行情、标记价格、资金费率、持仓量）
"""
from typing import Optional, Dict, List, Any, Tuple

import httpx

from . import transforms
from .binance_client import BinanceClient, check_params


def split_reduce(payload: Optional[Dict]) -> Tuple[Dict, bool]:
    """
    取出客户端参数 reduce，返回 (发送用的新 payload, reduce)
    """
    data = dict(payload or {})
    reduce = bool(data.pop("reduce", False))
    return data, reduce


class FuturesPublicAPI:
    """U 本位合约公共 API"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def ping(self, agent: Optional[httpx.AsyncClient] = None) -> bool:
        """
        测试连通性
        GET /fapi/v1/ping
        """
        await self.client.public_call("/v1/ping", agent=agent)
        return True

    async def time(self, agent: Optional[httpx.AsyncClient] = None) -> int:
        """
        获取服务器时间
        GET /fapi/v1/time
        """
        result = await self.client.public_call("/v1/time", agent=agent)
        return result["serverTime"]

    async def exchange_info(self, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        GET /fapi/v1/exchangeInfo
        """
        return await self.client.public_call("/v1/exchangeInfo", agent=agent)

    async def book(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        获取深度
        GET /fapi/v1/depth
        """
        check_params("futuresBook", payload, ["symbol"])
        depth = await self.client.public_call("/v1/depth", payload, agent=agent)
        return transforms.book(depth)

    async def trades(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        check_params("futuresTrades", payload, ["symbol"])
        return await self.client.public_call("/v1/trades", payload, agent=agent)

    async def trades_history(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        获取历史成交（需要 API Key）
        GET /fapi/v1/historicalTrades
        """
        check_params("futuresTradesHistory", payload, ["symbol"])
        return await self.client.key_call("/v1/historicalTrades", payload, agent=agent)

    async def agg_trades(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List[Dict]:
        check_params("futuresAggTrades", payload, ["symbol"])
        rows = await self.client.public_call("/v1/aggTrades", payload, agent=agent)
        return transforms.agg_trades(rows)

    async def candles(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List[Dict]:
        """
        获取 K 线数据
        GET /fapi/v1/klines

        Args:
            payload: 必须包含 symbol 和 interval
        """
        check_params("futuresCandles", payload, ["symbol", "interval"])
        rows = await self.client.public_call("/v1/klines", payload, agent=agent)
        return transforms.candles(rows)

    async def mark_price(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        标记价格和资金费率
        GET /fapi/v1/premiumIndex
        """
        return await self.client.public_call("/v1/premiumIndex", payload, agent=agent)

    async def funding_rate(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        资金费率历史（需要 API Key）
        GET /fapi/v1/fundingRate
        """
        check_params("futuresFundingRate", payload, ["symbol"])
        return await self.client.key_call("/v1/fundingRate", payload, agent=agent)

    async def daily_stats(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        return await self.client.public_call("/v1/ticker/24hr", payload, agent=agent)

    async def price(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        最新价格
        GET /fapi/v1/ticker/price

        Args:
            payload: 可选 symbol；reduce 为真且返回列表时，转换为 {symbol: price}
        """
        data, reduce = split_reduce(payload)
        result = await self.client.public_call("/v1/ticker/price", data, agent=agent)
        if reduce and isinstance(result, list):
            return transforms.index_by(result, "symbol", "price")
        return result

    async def book_ticker(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        最优挂单
        GET /fapi/v1/ticker/bookTicker

        Args:
            payload: 可选 symbol；reduce 为真且返回列表时，转换为 {symbol: bookTicker}
        """
        data, reduce = split_reduce(payload)
        result = await self.client.public_call("/v1/ticker/bookTicker", data, agent=agent)
        if reduce and isinstance(result, list):
            return transforms.index_by(result, "symbol")
        return result

    async def all_force_orders(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        强平订单
        GET /fapi/v1/allForceOrders
        """
        return await self.client.public_call("/v1/allForceOrders", payload, agent=agent)

    async def open_interest(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        未平仓合约数
        GET /fapi/v1/openInterest
        """
        check_params("futuresOpenInterest", payload, ["symbol"])
        return await self.client.public_call("/v1/openInterest", payload, agent=agent)
