"""
交易相关 API（下单、取消订单、查询订单等）
"""
from typing import Optional, Dict, List

import httpx

from .binance_client import BinanceClient
from .orders import prepare_spot_order


class TradeAPI:
    """现货交易 API（签名）"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        创建订单
        POST /api/v3/order

        Args:
            payload: 订单参数，必须包含 symbol, side ("BUY"/"SELL"), quantity；
                type 默认 LIMIT，限价类订单 timeInForce 默认 GTC

        Returns:
            订单创建结果
        """
        data = prepare_spot_order(payload, "order")
        return await self.client.private_call("/v3/order", data, method="POST", agent=agent)

    async def order_test(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        测试下单（不会真正成交）
        POST /api/v3/order/test
        """
        data = prepare_spot_order(payload, "orderTest")
        return await self.client.private_call("/v3/order/test", data, method="POST", agent=agent)

    async def get_order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        查询订单
        GET /api/v3/order
        """
        return await self.client.private_call("/v3/order", payload, agent=agent)

    async def cancel_order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        取消订单
        DELETE /api/v3/order
        """
        return await self.client.private_call("/v3/order", payload, method="DELETE", agent=agent)

    async def open_orders(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        当前挂单
        GET /api/v3/openOrders
        """
        return await self.client.private_call("/v3/openOrders", payload, agent=agent)

    async def all_orders(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        所有订单
        GET /api/v3/allOrders
        """
        return await self.client.private_call("/v3/allOrders", payload, agent=agent)

    async def my_trades(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        账户成交历史
        GET /api/v3/myTrades
        """
        return await self.client.private_call("/v3/myTrades", payload, agent=agent)
