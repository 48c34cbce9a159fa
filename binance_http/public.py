"""
公共 API（市场数据、K线、深度等）
"""
from typing import Optional, Dict, List, Any

import httpx

from . import transforms
from .binance_client import BinanceClient, check_params


class PublicAPI:
    """现货公共 API（无需签名）"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def ping(self, agent: Optional[httpx.AsyncClient] = None) -> bool:
        """
        测试连通性
        GET /api/v1/ping
        """
        await self.client.public_call("/v1/ping", agent=agent)
        return True

    async def time(self, agent: Optional[httpx.AsyncClient] = None) -> int:
        """
        获取服务器时间
        GET /api/v1/time

        Returns:
            服务器时间（毫秒时间戳）
        """
        result = await self.client.public_call("/v1/time", agent=agent)
        return result["serverTime"]

    async def exchange_info(self, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        获取交易规则和交易对信息
        GET /api/v3/exchangeInfo
        """
        return await self.client.public_call("/v3/exchangeInfo", agent=agent)

    async def book(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        获取深度
        GET /api/v1/depth

        Args:
            payload: 参数，必须包含 symbol，可选 limit

        Returns:
            {lastUpdateId, asks: [{price, qty}], bids: [{price, qty}]}
        """
        check_params("book", payload, ["symbol"])
        depth = await self.client.public_call("/v1/depth", payload, agent=agent)
        return transforms.book(depth)

    async def trades(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        获取近期成交
        GET /api/v1/trades
        """
        check_params("trades", payload, ["symbol"])
        return await self.client.public_call("/v1/trades", payload, agent=agent)

    async def trades_history(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        获取历史成交（需要 API Key）
        GET /api/v1/historicalTrades
        """
        check_params("tradesHistory", payload, ["symbol"])
        return await self.client.key_call("/v1/historicalTrades", payload, agent=agent)

    async def agg_trades(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List[Dict]:
        """
        获取归集成交
        GET /api/v1/aggTrades

        Returns:
            [{aggId, price, qty, firstTradeId, lastTradeId, time, isBuyerMaker}]
        """
        check_params("aggTrades", payload, ["symbol"])
        rows = await self.client.public_call("/v1/aggTrades", payload, agent=agent)
        return transforms.agg_trades(rows)

    async def candles(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List[Dict]:
        """
        获取 K 线数据
        GET /api/v1/klines

        Args:
            payload: 参数，必须包含 symbol 和 interval（如 "1m", "1h", "1d"），
                可选 startTime, endTime, limit

        Returns:
            K 线字典列表，字段见 transforms.CANDLE_FIELDS
        """
        check_params("candles", payload, ["symbol", "interval"])
        rows = await self.client.public_call("/v1/klines", payload, agent=agent)
        return transforms.candles(rows)

    async def daily_stats(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        24 小时行情统计
        GET /api/v1/ticker/24hr
        """
        return await self.client.public_call("/v1/ticker/24hr", payload, agent=agent)

    async def prices(self, agent: Optional[httpx.AsyncClient] = None) -> Dict[str, str]:
        """
        获取所有交易对最新价格
        GET /api/v1/ticker/allPrices

        Returns:
            {symbol: price}
        """
        rows = await self.client.public_call("/v1/ticker/allPrices", agent=agent)
        return transforms.index_by(rows, "symbol", "price")

    async def avg_price(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        当前平均价格
        GET /api/v3/avgPrice
        """
        return await self.client.public_call("/v3/avgPrice", payload, agent=agent)

    async def all_book_tickers(self, agent: Optional[httpx.AsyncClient] = None) -> Dict[str, Dict]:
        """
        获取所有交易对最优挂单
        GET /api/v1/ticker/allBookTickers

        Returns:
            {symbol: bookTicker}
        """
        rows = await self.client.public_call("/v1/ticker/allBookTickers", agent=agent)
        return transforms.index_by(rows, "symbol")
