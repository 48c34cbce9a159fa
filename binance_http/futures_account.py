"""
合约账户 API（持仓模式、杠杆、保证金、余额、收益、用户数据流）
"""
from typing import Optional, Dict, List, Any

import httpx

from . import transforms
from .binance_client import BinanceClient, BinanceConfigError, check_params
from .futures_public import split_reduce


class FuturesAccountAPI:
    """U 本位合约账户 API（签名）"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def change_position_mode(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        更改持仓模式
        POST /fapi/v1/positionSide/dual

        Args:
            payload: 必须包含 dualSidePosition（True: 双向持仓, False: 单向持仓）
        """
        # False 是合法取值，这里只检查字段是否存在
        check_params("futuresChangePositionMode", payload)
        if payload.get("dualSidePosition") is None:
            raise BinanceConfigError("Method futuresChangePositionMode requires dualSidePosition parameter.")
        data = {**payload, "dualSidePosition": "true" if payload["dualSidePosition"] else "false"}
        return await self.client.private_call("/v1/positionSide/dual", data, method="POST", agent=agent)

    async def get_position_mode(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        查询持仓模式
        GET /fapi/v1/positionSide/dual
        """
        return await self.client.private_call("/v1/positionSide/dual", payload, agent=agent)

    async def account_balance(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        账户余额
        GET /fapi/v2/balance
        """
        return await self.client.private_call("/v2/balance", payload, agent=agent)

    async def account_info(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        账户信息
        GET /fapi/v2/account
        """
        return await self.client.private_call("/v2/account", payload, agent=agent)

    async def change_leverage(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        调整杠杆倍数
        POST /fapi/v1/leverage

        Args:
            payload: 必须包含 symbol, leverage
        """
        check_params("futuresChangeLeverage", payload, ["symbol", "leverage"])
        return await self.client.private_call("/v1/leverage", payload, method="POST", agent=agent)

    async def change_margin_type(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        更改保证金模式
        POST /fapi/v1/marginType

        Args:
            payload: 必须包含 symbol, marginType（ISOLATED / CROSSED）
        """
        check_params("futuresChangeMarginType", payload, ["symbol", "marginType"])
        return await self.client.private_call("/v1/marginType", payload, method="POST", agent=agent)

    async def modify_position_margin(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        调整逐仓保证金
        POST /fapi/v1/positionMargin

        Args:
            payload: 必须包含 symbol, amount；type 1 增加，2 减少
        """
        check_params("futuresModifyPositionMargin", payload, ["symbol", "amount"])
        return await self.client.private_call("/v1/positionMargin", payload, method="POST", agent=agent)

    async def position_margin_history(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> List:
        """
        逐仓保证金变动历史
        GET /fapi/v1/positionMargin/history
        """
        check_params("futuresPositionMarginHistory", payload, ["symbol"])
        return await self.client.private_call("/v1/positionMargin/history", payload, agent=agent)

    async def position_risk(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        持仓风险
        GET /fapi/v1/positionRisk
        """
        return await self.client.private_call("/v1/positionRisk", payload, agent=agent)

    async def income_history(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> List:
        """
        收益历史（资金费、已实现盈亏、手续费等）
        GET /fapi/v1/income
        """
        return await self.client.private_call("/v1/income", payload, agent=agent)

    async def leverage_bracket(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        杠杆分层标准
        GET /fapi/v1/leverageBracket

        Args:
            payload: 可选 symbol；reduce 为真且返回列表时，转换为 {symbol: brackets}

        Returns:
            指定 symbol 时返回其 brackets 列表
        """
        data, reduce = split_reduce(payload)
        result = await self.client.private_call("/v1/leverageBracket", data, agent=agent)
        if not isinstance(result, list):
            return result.get("brackets")
        if reduce:
            return transforms.index_by(result, "symbol", "brackets")
        return result

    async def get_user_data_stream(self, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        创建 listenKey
        POST /fapi/v1/listenKey
        """
        return await self.client.private_call("/v1/listenKey", None, method="POST", no_data=True, agent=agent)

    async def keep_user_data_stream(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        延长 listenKey 有效期
        PUT /fapi/v1/listenKey
        """
        return await self.client.private_call("/v1/listenKey", payload, method="PUT", no_extra=True, agent=agent)

    async def close_user_data_stream(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        关闭 listenKey
        DELETE /fapi/v1/listenKey
        """
        return await self.client.private_call("/v1/listenKey", payload, method="DELETE", no_extra=True, agent=agent)
