"""
合约交易 API（下单、批量下单、撤单、查询订单）
"""
from typing import Optional, Dict, List, Any

import httpx

from .binance_client import BinanceClient, check_params
from .orders import prepare_futures_order


class FuturesTradeAPI:
    """U 本位合约交易 API（签名）"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        创建订单
        POST /fapi/v1/order

        Args:
            payload: 订单参数，必须包含 symbol, side, quantity；type 默认 LIMIT。
                LIMIT 需要 price, timeInForce（默认 GTC）；STOP / TAKE_PROFIT 需要
                price, stopPrice；STOP_MARKET / TAKE_PROFIT_MARKET 需要 stopPrice

        Returns:
            订单创建结果
        """
        data = prepare_futures_order(payload, "futuresOrder")
        return await self.client.private_call("/v1/order", data, method="POST", agent=agent)

    async def order_test(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        测试下单
        POST /fapi/v1/order/test
        """
        data = prepare_futures_order(payload, "futuresOrderTest")
        return await self.client.private_call("/v1/order/test", data, method="POST", agent=agent)

    async def batch_orders(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        批量下单
        POST /fapi/v1/batchOrders

        Args:
            payload: 必须包含 batchOrders（JSON 字符串形式的订单列表）
        """
        check_params("futuresBatchOrders", payload, ["batchOrders"])
        return await self.client.private_call("/v1/batchOrders", payload, method="POST", agent=agent)

    async def get_order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        查询订单
        GET /fapi/v1/order
        """
        check_params("futuresGetOrder", payload, ["symbol"])
        return await self.client.private_call("/v1/order", payload, agent=agent)

    async def cancel_order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        撤销订单
        DELETE /fapi/v1/order
        """
        check_params("futuresCancelOrder", payload, ["symbol"])
        return await self.client.private_call("/v1/order", payload, method="DELETE", agent=agent)

    async def cancel_all_open_orders(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        撤销全部挂单
        DELETE /fapi/v1/allOpenOrders
        """
        check_params("futuresCancelAllOpenOrders", payload, ["symbol"])
        return await self.client.private_call("/v1/allOpenOrders", payload, method="DELETE", agent=agent)

    async def cancel_multiple_orders(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> List:
        """
        批量撤单
        DELETE /fapi/v1/batchOrders

        Args:
            payload: 必须包含 symbol，以及 orderIdList 或 origClientOrderIdList
        """
        check_params("futuresCancelMultipleOrders", payload, ["symbol"])
        return await self.client.private_call("/v1/batchOrders", payload, method="DELETE", agent=agent)

    async def count_down_cancel_all_orders(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        倒计时撤销全部订单
        POST /fapi/v1/countdownCancelAll

        Args:
            payload: 必须包含 symbol, countdownTime（毫秒，0 表示取消倒计时）
        """
        check_params("futuresCountDownCancelAllOrders", payload, ["symbol", "countdownTime"])
        return await self.client.private_call("/v1/countdownCancelAll", payload, method="POST", agent=agent)

    async def get_open_order(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        查询当前挂单
        GET /fapi/v1/openOrder
        """
        check_params("futuresGetOpenOrder", payload, ["symbol"])
        return await self.client.private_call("/v1/openOrder", payload, agent=agent)

    async def get_all_open_orders(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> List:
        """
        查询全部挂单
        GET /fapi/v1/openOrders
        """
        return await self.client.private_call("/v1/openOrders", payload, agent=agent)

    async def get_all_orders(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        查询所有订单
        GET /fapi/v1/allOrders
        """
        check_params("futuresGetAllOrders", payload, ["symbol"])
        return await self.client.private_call("/v1/allOrders", payload, agent=agent)

    async def user_trades(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        账户成交历史
        GET /fapi/v1/userTrades
        """
        check_params("futuresUserTrades", payload, ["symbol"])
        return await self.client.private_call("/v1/userTrades", payload, agent=agent)
